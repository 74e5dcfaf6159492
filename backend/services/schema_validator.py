from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
import logging

logger = logging.getLogger(__name__)

# Columns every deployment must have for the API to work
REQUIRED_COLUMNS = {
    'users': ['id', 'first_name', 'last_name', 'email', 'password'],
    'books': ['id', 'title', 'author', 'publication_year', 'rating', 'review', 'user_id'],
}


class SchemaValidator:
    @staticmethod
    def check(engine: Engine) -> dict:
        """
        Check that the users and books tables carry the expected columns.

        Returns:
            dict: {
                "valid": bool,
                "issues": list[str],
                "missing_tables": list[str],
                "missing_columns": list[str]
            }
        """
        issues = []
        missing_tables = []
        missing_columns = []

        try:
            inspector = inspect(engine)
            tables = inspector.get_table_names()
            for table, columns in REQUIRED_COLUMNS.items():
                if table not in tables:
                    missing_tables.append(table)
                    issues.append(f"Missing '{table}' table")
                    continue
                present = {col['name'] for col in inspector.get_columns(table)}
                for column in columns:
                    if column not in present:
                        missing_columns.append(f"{table}.{column}")
                        issues.append(f"Missing '{column}' column in '{table}' table")
        except SQLAlchemyError as e:
            logger.error(f"Schema inspection failed: {e}", exc_info=True)
            issues.append(f"Database unreachable: {e}")

        valid = len(issues) == 0
        if not valid:
            logger.warning(f"Schema validation failed: {issues}")

        return {
            "valid": valid,
            "issues": issues,
            "missing_tables": missing_tables,
            "missing_columns": missing_columns
        }
