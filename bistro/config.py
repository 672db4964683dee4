from pydantic_settings import BaseSettings
from typing import List, Optional

from bistro_common.mongo import build_atlas_uri


class Settings(BaseSettings):

    # Application
    APP_NAME: str = "Bistro API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Database (MongoDB)
    MONGODB_URI: Optional[str] = None
    DB_USER: str = ""
    DB_PASS: str = ""
    DB_CLUSTER_HOST: str = "cluster0.zxotz8q.mongodb.net"
    MONGODB_DB_NAME: str = "bistroDb"
    MONGODB_SERVER_API_VERSION: Optional[str] = "1"

    # Security
    ACCESS_TOKEN_SECRET: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Require a matching bearer token on GET /carts
    CART_OWNERSHIP_CHECK: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def mongodb_uri(self) -> str:
        if self.MONGODB_URI:
            return self.MONGODB_URI
        return build_atlas_uri(self.DB_USER, self.DB_PASS, self.DB_CLUSTER_HOST)


settings = Settings()
