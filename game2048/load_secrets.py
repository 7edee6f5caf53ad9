import os
from dotenv import load_dotenv

load_dotenv()

database_url = os.getenv("DATABASE_URL")
user = os.getenv("DB_USER")
password = os.getenv("DB_PASSWORD")
host = os.getenv("DB_HOST")
port = os.getenv("DB_PORT", "5432")
db_name = os.getenv("DB_NAME")
default_board_size = int(os.getenv("DEFAULT_BOARD_SIZE", "4"))
log_level = os.getenv("LOG_LEVEL", "INFO").upper()

if __name__ == "__main__":
    print(database_url, user, host, port, db_name, default_board_size, log_level)
