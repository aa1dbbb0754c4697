import os
import mysql.connector
from config import Config, BASE_DIR

SCHEMA_PATH = os.path.join(BASE_DIR, 'schema.sql')


def schema_statements(path=SCHEMA_PATH):
    with open(path, 'r') as f:
        # MySQL executes one statement per call
        return [s.strip() for s in f.read().split(';') if s.strip()]


def init_db(path=SCHEMA_PATH):
    conn = mysql.connector.connect(
        host=Config.MYSQL_HOST,
        user=Config.MYSQL_USER,
        password=Config.MYSQL_PASSWORD,
        database=Config.MYSQL_DATABASE
    )
    try:
        with conn.cursor() as cur:
            for statement in schema_statements(path):
                cur.execute(statement)
            conn.commit()
    finally:
        conn.close()


if __name__ == "__main__":
    init_db()
