"""
Command-line interface for Weebly Cloud Python SDK
Signs requests and calls Weebly Cloud API operations from the shell
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from .version import __version__
from .config import configure_logging, load_settings
from .endpoints import ENDPOINTS, get_endpoint
from .exceptions import WeeblyCloudError
from .signing import (
    SigningError,
    build_canonical_message,
    create_signable_request,
    sign,
)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_API_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog='weebly-cloud',
        description='Weebly Cloud API command-line interface'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'Weebly Cloud Python SDK {__version__}'
    )
    parser.add_argument(
        '--config',
        help='JSON settings file with credentials (default: WEEBLY_API_KEY / WEEBLY_API_SECRET environment variables)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log redacted request and response summaries to stderr'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('operations', help='List supported API operations')

    sign_parser = subparsers.add_parser('sign', help='Compute the signature for a request')
    sign_parser.add_argument('--method', required=True, help='HTTP method (GET, POST, PATCH, PUT, DELETE)')
    sign_parser.add_argument('--path', required=True, help='Path after the API root, e.g. user/42')
    sign_parser.add_argument('--body', help='Exact JSON body text (default: no body)')
    sign_parser.add_argument('--show-message', action='store_true', help='Also print the canonical message')

    call_parser = subparsers.add_parser('call', help='Call an API operation')
    call_parser.add_argument('operation', help='Operation name, see "weebly-cloud operations"')
    call_parser.add_argument(
        '--param', action='append', default=[], metavar='KEY=VALUE',
        help='Path identifier or required field, may be repeated'
    )
    call_parser.add_argument(
        '--option', action='append', default=[], metavar='KEY=VALUE',
        help='Optional field, may be repeated; blank values are not sent'
    )

    return parser


def parse_assignments(items: List[str]) -> Dict[str, Any]:
    """
    Parse KEY=VALUE arguments.

    Values that parse as JSON (numbers, true/false, null, quoted strings)
    are decoded; anything else is kept as a plain string.
    """
    result: Dict[str, Any] = {}
    for item in items:
        key, sep, raw = item.partition('=')
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got: {item}")
        try:
            result[key] = json.loads(raw)
        except ValueError:
            result[key] = raw
    return result


def handle_operations_command(args) -> int:
    """Handle listing of the endpoint table."""
    for name, endpoint in ENDPOINTS.items():
        fields = list(endpoint.required) + [f"[{o}]" for o in endpoint.optional]
        print(f"{name:<24} {endpoint.method.value:<6} {endpoint.path}")
        if fields:
            print(f"{'':<24} fields: {', '.join(fields)}")
    return EXIT_OK


def _load_settings(args):
    """
    Load settings and apply their log level.

    --verbose has already switched the SDK logger to DEBUG and wins over
    the configured level.
    """
    settings = load_settings(args.config)
    if not args.verbose:
        configure_logging(settings.logging_config.level)
    return settings


def handle_sign_command(args) -> int:
    """Handle signature computation."""
    request = create_signable_request(args.method, args.path, args.body)
    secret = _load_settings(args).credentials.secret

    if args.show_message:
        print(build_canonical_message(request))
        print()
    print(sign(request.method, request.path, request.body, secret))
    return EXIT_OK


def handle_call_command(args) -> int:
    """Handle an API call."""
    get_endpoint(args.operation)
    params = parse_assignments(args.param)
    options = parse_assignments(args.option)

    settings = _load_settings(args)
    if args.verbose:
        settings.client.debug_logging = True

    with settings.create_client() as client:
        response = client.call(args.operation, params, options)

    print(f"HTTP {response.status_code} {response.reason}")
    if response.text:
        print(response.text)
    return EXIT_OK if response.ok else EXIT_API_ERROR


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI

    Args:
        argv: Command line arguments (None to use sys.argv)

    Returns:
        int: Exit code (0 success, 1 SDK error, 2 API error response)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging('DEBUG')

    try:
        if args.command == 'operations':
            return handle_operations_command(args)
        elif args.command == 'sign':
            return handle_sign_command(args)
        elif args.command == 'call':
            return handle_call_command(args)
        else:
            parser.print_help()
            return EXIT_ERROR

    except (WeeblyCloudError, SigningError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
