"""Shared entry point for the standalone job scripts"""
import argparse
import logging
import traceback
from typing import Callable, List, Optional

from pymongo.errors import PyMongoError

from offers_ops.infra.config import settings
from offers_ops.infra.mongo import MongoDBClient, mask_mongodb_uri, mongodb_session
from offers_ops.utils.logging_utils import configure_logging, log_job_milestone
from offers_ops.utils.report import print_banner

logger = logging.getLogger(__name__)

Job = Callable[[MongoDBClient, argparse.Namespace], int]


def build_parser(description: str, clear_help: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    if clear_help:
        parser.add_argument("--clear", action="store_true", help=clear_help)
    return parser


def run_job(
    title: str,
    job: Job,
    parser: argparse.ArgumentParser,
    argv: Optional[List[str]] = None,
) -> int:
    """
    Parse arguments, connect, run the job and return the process exit code.

    Args:
        title: Banner printed before the run
        job: Callable receiving the open client and parsed arguments, returning an exit code
        parser: Argument parser for the script
        argv: Arguments to parse instead of sys.argv

    Returns:
        0 on success, 1 on connection failure, unhandled error, or a failing job result
    """
    args = parser.parse_args(argv)
    configure_logging(settings.log_level)

    print_banner(title)
    print(f"Connecting to MongoDB: {mask_mongodb_uri(settings.mongodb_uri)}")

    try:
        with mongodb_session() as mongo:
            print(f"Using database: {mongo.db_name}")
            log_job_milestone(logger, title, "started", {"db": mongo.db_name, "args": vars(args)})
            try:
                exit_code = job(mongo, args)
            except PyMongoError as e:
                print(f"ERROR: Database error during {title}: {e}")
                traceback.print_exc()
                return 1
            log_job_milestone(logger, title, "finished", {"exit_code": exit_code})
            return exit_code
    except PyMongoError as e:
        print(f"ERROR: Failed to connect to MongoDB: {e}")
        return 1
    except Exception as e:
        print(f"ERROR: {title} failed: {e}")
        traceback.print_exc()
        return 1
    finally:
        print("MongoDB connection closed")
