from dataclasses import dataclass

PORT_MAX = 65535


@dataclass
class Config:
    """Example application settings."""

    database_url: str
    port: int
    debug: bool

    def __post_init__(self) -> None:
        if not 0 <= self.port <= PORT_MAX:
            raise ValueError(f"port must be between 0 and {PORT_MAX}, got {self.port}")
