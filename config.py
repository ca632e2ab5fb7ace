import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# === CONFIG ===
SECRET_KEY = os.getenv("SECRET_KEY", "your-secret-key-change-this-in-production")

# Database Configuration (in-memory SQLite unless overridden)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Demo catalogue seeding
SEED_PRODUCT_COUNT = int(os.getenv("SEED_PRODUCT_COUNT", "500"))
SEED_RANDOM_SEED = int(os.getenv("SEED_RANDOM_SEED", "42"))

# Paging defaults
PAGER_DEFAULT_PAGE_SIZE = int(os.getenv("PAGER_DEFAULT_PAGE_SIZE", "5"))
PRODUCTS_DEFAULT_PAGE_SIZE = int(os.getenv("PRODUCTS_DEFAULT_PAGE_SIZE", "20"))
PAGER_PAGES_TO_DISPLAY = int(os.getenv("PAGER_PAGES_TO_DISPLAY", "5"))
PAGE_SIZE_CHOICES = [int(size) for size in os.getenv("PAGE_SIZE_CHOICES", "5,10,20,50").split(",") if size.strip()]

# Feature Flags ("enabled" or "disabled")
PAGER_FIRST_LAST_NAVIGATION = os.getenv("PAGER_FIRST_LAST_NAVIGATION", "enabled").lower() == "enabled"
PAGER_SKIP_NAVIGATION = os.getenv("PAGER_SKIP_NAVIGATION", "enabled").lower() == "enabled"
