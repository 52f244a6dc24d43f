import pathlib

from sqlalchemy.ext.asyncio import create_async_engine

from daily_guess.load_secrets import sqlite_path

if sqlite_path:
    file_path = pathlib.Path(sqlite_path)
else:
    file_path = pathlib.Path(__file__).parents[1]
    file_path /= "./daily_guess.sqlite3"
sqlite_url = f"sqlite+aiosqlite:///{file_path}"


engine = create_async_engine(url=sqlite_url, echo=False)
