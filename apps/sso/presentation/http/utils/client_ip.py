"""Client IP Utilities."""

from typing import Optional

from fastapi import Request

FORWARDED_FOR_HEADER = "x-forwarded-for"

IPV6_LOOPBACK = "::1"
IPV4_LOOPBACK = "127.0.0.1"


def _first_value(header: Optional[str]) -> Optional[str]:
    """쉼표로 구분된 헤더에서 첫 번째 값 추출.

    X-Forwarded-For 헤더는 프록시 체인에서 쉼표로 구분될 수 있음.
    """
    return header.split(",")[0].strip() if header else None


def normalize_ip_address(ip: Optional[str]) -> Optional[str]:
    """IPv6 loopback을 IPv4 loopback으로 변환. 그 외 값은 그대로."""
    if ip == IPV6_LOOPBACK:
        return IPV4_LOOPBACK
    return ip


def get_remote_ip_address(request: Request) -> Optional[str]:
    """요청자 IP 결정.

    우선순위:
    1. X-Forwarded-For 헤더 (프록시/로드밸런서)
    2. 연결 주소
    """
    ip = _first_value(request.headers.get(FORWARDED_FOR_HEADER))
    if not ip and request.client:
        ip = request.client.host
    return normalize_ip_address(ip)
