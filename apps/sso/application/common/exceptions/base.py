"""Application Exception Base."""


class ApplicationError(Exception):
    """애플리케이션 예외 기본 클래스."""

    def __init__(self, message: str = "Application error") -> None:
        self.message = message
        super().__init__(message)


class MissingParameterError(ApplicationError):
    """필수 요청 파라미터 누락."""

    def __init__(self, *names: str) -> None:
        self.names = names
        joined = ", ".join(f"'{name}'" for name in names)
        super().__init__(f"Missing required param(s): {joined}")
