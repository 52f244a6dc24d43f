from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from daily_guess.load_secrets import db_backend

if db_backend == "postgres":
    from daily_guess.create_postgres_engine import engine
else:
    from daily_guess.create_sqlite_engine import engine

# Centralized session factory to avoid creating it in router modules.
Session = async_sessionmaker(
    autocommit=False,
    class_=AsyncSession,
    autoflush=True,
    expire_on_commit=False,
    bind=engine,
)
