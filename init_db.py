"""Create the projects table and its indexes, then print the table structure"""
import asyncio
import sqlalchemy
from config import ApplicationConfig
from src.adapter.services.database import Database


def _describe_projects(sync_conn):
    inspector = sqlalchemy.inspect(sync_conn)
    columns = inspector.get_columns("projects")
    indexes = inspector.get_indexes("projects")
    return columns, indexes


async def main():
    database = Database(ApplicationConfig.DB_URI, echo=ApplicationConfig.DB_ECHO)

    print(f"Engine dialect: {database.engine.dialect.name}")
    print(f"Engine driver: {database.engine.dialect.driver}")

    try:
        await database.ping()
        print("Connection successful!")

        print("\nCreating projects table...")
        await database.create_all()
        print("Tables created successfully!")

        async with database.engine.connect() as conn:
            columns, indexes = await conn.run_sync(_describe_projects)

        print("\nTable structure:")
        for column in columns:
            nullable = "YES" if column["nullable"] else "NO"
            print(f"  {column['name']:<12} {str(column['type']):<14} nullable={nullable}")

        print("\nIndexes:")
        for index in indexes:
            print(f"  {index['name']}: {', '.join(index['column_names'])}")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
