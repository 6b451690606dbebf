from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Framebooth"
    app_description: str = "Frame layout and photo composition engine for web photobooths"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = 8000

    jpeg_quality: int = 95
    fallback_jpeg_quality: int = 90
    fallback_width: int = 600
    fallback_height: int = 1200

    # Visual ratio drift tolerated before a slot's height is recomputed.
    aspect_ratio_tolerance: float = 0.05
    request_timeout: float = 30
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "FRAMEBOOTH_"


settings = Settings()
