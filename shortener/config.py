from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server settings
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    # 產生short_url時使用的前綴，例如 http://127.0.0.1:8080/aB3xYz
    BASE_URL: str = "http://127.0.0.1:8080"

    # Short code settings
    SHORT_CODE_LENGTH: int = 6
    SHORT_CODE_MAX_ATTEMPTS: int = 10  # collision retries before giving up
    MAX_CUSTOM_CODE_LENGTH: int = 64

    # Logging settings
    LOG_LEVEL: str = "INFO"
    REQUEST_LOGGING_ENABLED: bool = True

    # "env_file": ".env"：從.env檔案讀取環境變數
    # "extra": "ignore"：環境變數裡有、但Settings沒定義的欄位直接忽略
    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
