import os
from dotenv import load_dotenv

load_dotenv()

db_backend = os.getenv("DB_BACKEND", "sqlite")
user = os.getenv("DB_USER")
password = os.getenv("DB_PASSWORD")
host = os.getenv("DB_HOST", "localhost")
port = os.getenv("DB_PORT", "5432")
db_name = os.getenv("DB_NAME")
sqlite_path = os.getenv("SQLITE_PATH")

max_guesses = int(os.getenv("MAX_GUESSES", "6"))
leaderboard_page_size = int(os.getenv("LEADERBOARD_PAGE_SIZE", "100"))
leaderboard_write_token = os.getenv("LEADERBOARD_WRITE_TOKEN") or None

catalog_source = os.getenv("CATALOG_SOURCE", "mock")
huma_api_url = os.getenv("HUMA_API_URL", "https://api.humahr.com")
huma_access_token = os.getenv("HUMA_ACCESS_TOKEN")

allowed_origins = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
server_port = int(os.getenv("PORT", "3001"))

if __name__ == "__main__":
    print(db_backend, user, host, port, db_name, catalog_source, allowed_origins)
