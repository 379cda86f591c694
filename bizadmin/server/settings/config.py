from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict
from dotenv import load_dotenv
import os

load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings(BaseModel):
    # defaults come from the environment, so they are validated too
    model_config = ConfigDict(validate_default=True)

    app_name: str = os.getenv("APP_NAME", "bizadmin - quotations, clients, invoices & reports")
    environment: str = os.getenv("ENVIRONMENT", "dev")
    debug: bool = os.getenv("DEBUG", "1") == "1"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # the whole "database": one JSON file with four collections
    db_path: str = os.getenv("BIZADMIN_DB_PATH", "./db.json")
    static_dir: Optional[str] = os.getenv("BIZADMIN_STATIC_DIR") or None

    cors_origins: List[str] = _split_csv(os.getenv("CORS_ORIGINS", "*"))
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # "length" (len + 1, can reissue ids after deletes) or "monotonic"
    quotation_id_strategy: Literal["length", "monotonic"] = os.getenv("QUOTATION_ID_STRATEGY", "length")

    # printed on the quotation document
    company_name: str = os.getenv("COMPANY_NAME", "Your Company")
    company_address: str = os.getenv("COMPANY_ADDRESS", "")
    company_email: str = os.getenv("COMPANY_EMAIL", "")
    company_phone: str = os.getenv("COMPANY_PHONE", "")

    def company(self) -> dict:
        return {
            "name": self.company_name,
            "address": self.company_address,
            "email": self.company_email,
            "phone": self.company_phone,
        }

settings = Settings()
