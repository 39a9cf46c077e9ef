import os
from pathlib import Path
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

# Tìm file .env ở thư mục gốc của project
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    logger.info(f"Đang tải biến môi trường từ: {env_path}")
    # Biến môi trường đã có sẵn được ưu tiên hơn giá trị trong .env
    load_dotenv(dotenv_path=env_path, override=False)
else:
    logger.debug(f"Không tìm thấy file .env tại: {env_path}")

# Cấu hình cơ bản
# Không có giá trị mặc định: ứng dụng từ chối khởi động nếu thiếu SECRET_KEY
SECRET_KEY = os.getenv("SECRET_KEY")
DEBUG = os.getenv("DEBUG", "False").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", "3001"))

# Cấu hình database
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "3306")
DB_NAME = os.getenv("DB_NAME", "badminton_shop")
DB_USER = os.getenv("DB_USER", "root")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)
DB_ECHO = os.getenv("DB_ECHO", "False").lower() == "true"

# Cấu hình JWT
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

# Cấu hình CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,"
        "https://badminton-econ-app.vercel.app,"
        "https://badminton-econ-app-nkv4.vercel.app"
    ).split(",")
    if origin.strip()
]

# Tỷ giá cố định để hiển thị giá: giá lưu trong DB là VND, giá trả về client là USD
VND_PER_USD = 24000
