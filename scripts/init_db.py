from clientflow.config import configure_logging, get_settings
from clientflow.db.engine import create_db_engine
from clientflow.db.migrations import init_schema

def main():
    settings = get_settings()
    configure_logging(settings.log_level)

    engine = create_db_engine(settings.database_url)
    version = init_schema(engine)
    engine.dispose()
    print(f"DB schema ready at version {version}.")

if __name__ == "__main__":
    main()
