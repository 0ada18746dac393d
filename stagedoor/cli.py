"""
Command line access to the site's API.

Usage:
    python -m stagedoor.cli login admin@example.com secret
    python -m stagedoor.cli get /api/faq?activeOnly=false
    python -m stagedoor.cli put /api/admin/hero --data '{"title": "Live"}'
    python -m stagedoor.cli upload ./poster.jpg
    python -m stagedoor.cli logout

The access token is kept in TOKEN_FILE between invocations.
"""
import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from dotenv import load_dotenv

from stagedoor.api_client import ApiClient, create_api_client
from stagedoor.errors import ApiError
from stagedoor.services import AuthService, MediaService
from config.settings import settings


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def _parse_data(raw: Optional[str]) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise SystemExit(f"--data is not valid JSON: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stagedoor",
        description="Call the site's admin API with stored credentials",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    login = sub.add_parser("login", help="Log in and store the access token")
    login.add_argument("email")
    login.add_argument("password")

    sub.add_parser("logout", help="End the session and forget the token")

    get = sub.add_parser("get", help="GET a path")
    get.add_argument("path")
    get.add_argument("--no-cache", action="store_true", help="Bypass the response cache")

    for verb in ("post", "put"):
        cmd = sub.add_parser(verb, help=f"{verb.upper()} JSON to a path")
        cmd.add_argument("path")
        cmd.add_argument("--data", help="JSON request body")

    delete = sub.add_parser("delete", help="DELETE a path")
    delete.add_argument("path")

    upload = sub.add_parser("upload", help="Upload a media file")
    upload.add_argument("file")

    return parser


def run(args: argparse.Namespace, client: ApiClient) -> Any:
    """Dispatch one parsed command; returns whatever should be printed."""
    if args.command == "login":
        response = AuthService(client).login(args.email, args.password)
        return {"loggedIn": True, "user": response.user.model_dump() if response.user else None}
    if args.command == "logout":
        AuthService(client).logout()
        return {"loggedIn": False}
    if args.command == "get":
        return client.get(args.path, use_cache=not args.no_cache)
    if args.command == "post":
        return client.post(args.path, _parse_data(args.data))
    if args.command == "put":
        return client.put(args.path, _parse_data(args.data))
    if args.command == "delete":
        return client.delete(args.path)
    if args.command == "upload":
        return MediaService(client).upload_file(args.file).model_dump(by_alias=True, exclude_none=True)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    client = create_api_client(settings)
    try:
        result = run(args, client)
    except ApiError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    _print_json(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
