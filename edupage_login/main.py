from __future__ import annotations

import argparse
import logging
import os

from dotenv import load_dotenv

from .errors import EdupageError
from .session import Edupage
from .utils.file_utils import save_user_data

load_dotenv()


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_float(name: str) -> float | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _env_bool(name: str) -> bool:
    value = _env_str(name)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Log in to an EduPage portal and dump the user payload.")
    parser.add_argument("--subdomain", default=_env_str("EDUPAGE_SUBDOMAIN"), help="School subdomain, e.g. 'myschool' for myschool.edupage.org")
    parser.add_argument("--username", default=_env_str("EDUPAGE_USERNAME"), help="EduPage login name")
    parser.add_argument("--password", default=_env_str("EDUPAGE_PASSWORD"), help="EduPage password")
    parser.add_argument(
        "--timeout",
        type=float,
        default=_env_float("EDUPAGE_TIMEOUT"),
        help="Per-request timeout in seconds (default: wait indefinitely)",
    )
    parser.add_argument("--output", default=_env_str("EDUPAGE_OUTPUT"), help="Write the decoded user payload to this JSON file")
    parser.add_argument("--verbose", action="store_true", default=_env_bool("EDUPAGE_VERBOSE"), help="Enable debug logging")
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    if not (args.subdomain and args.username and args.password):
        logging.error("--subdomain, --username and --password (or EDUPAGE_* variables) are required.")
        return 2

    with Edupage(timeout=args.timeout) as edupage:
        try:
            user_data = edupage.login(args.subdomain, args.username, args.password)
        except EdupageError as exc:
            logging.error("Login failed (%s): %s", exc.kind.value, exc)
            if exc.retryable:
                logging.info("This failure may be transient; try again later.")
            return 1
        except ValueError as exc:
            logging.error("%s", exc)
            return 2

    keys = sorted(user_data.as_dict())
    logging.info("User payload has %s top-level keys: %s", len(keys), ", ".join(keys))

    if args.output:
        save_user_data(args.output, user_data)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
