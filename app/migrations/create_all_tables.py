"""
Migration script to create all database tables

Run this script to create all database tables:
    python -m app.migrations.create_all_tables
"""

from app.database import Base, DATABASE_URL, create_tables


def main():
    """Create all database tables"""
    print("=" * 60)
    print(f"Creating database tables on {DATABASE_URL.split('@')[-1]} ...")
    print("=" * 60)

    try:
        create_tables()
    except Exception as e:
        print(f"\n❌ Error creating tables: {e}")
        raise

    print("\n✅ All tables created successfully!")
    print("\nTables:")
    for table_name in Base.metadata.tables:
        print(f"   - {table_name}")
    print("=" * 60)


if __name__ == "__main__":
    main()
