"""
CLI main application module.

This module contains the main application entry point: it loads the
configuration, opens the database connection and runs the demonstration.
"""

import logging
import sys
from typing import Optional, Sequence

import psycopg

from ..constants import (
    EXIT_CONFIG_ERROR,
    EXIT_DATABASE_ERROR,
    EXIT_OPERATION_FAILED,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
)

from ..core import run_demo

from ..database import (
    AlbumRepository,
    AlbumRepositoryError,
    StoreFailure,
    create_database_config,
    database_session,
    get_table_name,
    reset_album_table,
)

from .parser import (
    create_argument_parser,
)

from ..utils import setup_logging

from ..config import Env
from ..config.loader import ConfigLoader
from ..config.schema import ConfigSchema

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None):
    """Main entry point for the script."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        config = ConfigLoader.load(schema=ConfigSchema, cli_args=args)
        env = Env.from_schema(config)
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    logger.debug(f"Configuration: {env.mask()}")

    db_config = create_database_config(
        url=env.database_url, connection_timeout=env.DB_CONNECT_TIMEOUT
    )
    if db_config is None:
        logger.error("Invalid database configuration")
        sys.exit(EXIT_CONFIG_ERROR)

    table_name = get_table_name(args.test_mode)

    try:
        with database_session(db_config) as connection:
            print("Connected!")

            if args.reset_table:
                reset_album_table(connection, table_name)

            repository = AlbumRepository(connection, table_name)
            run_demo(
                repository,
                artist=args.artist,
                album_id=args.album_id,
                update_id=args.update_id,
                delete_id=args.delete_id,
            )

    except StoreFailure as e:
        logger.error(f"Database operation failed ({e.category}): {e}")
        sys.exit(EXIT_OPERATION_FAILED)
    except AlbumRepositoryError as e:
        logger.error(str(e))
        sys.exit(EXIT_OPERATION_FAILED)
    except psycopg.Error as e:
        logger.error(f"Database error: {e}")
        sys.exit(EXIT_DATABASE_ERROR)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)

    logger.info("Demonstration completed successfully")
