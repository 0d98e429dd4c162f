"""IdentityProviderGateway Port.

OAuth 프로바이더(LinkedIn, Google)와의 통신을 담당하는 Gateway 인터페이스입니다.
"""

from typing import Protocol

from apps.sso.domain.value_objects.identity import Identity


class IdentityProviderGateway(Protocol):
    """프로바이더 Gateway 인터페이스.

    구현체:
        - OAuthIdentityGateway (infrastructure/oauth/)
    """

    async def validate_user(self, code: str) -> Identity:
        """인증 코드를 교환하고 이메일/프로필을 조회.

        Raises:
            ProviderValidationFailedError: 코드 교환 또는 프로필 조회 실패
        """
        ...
