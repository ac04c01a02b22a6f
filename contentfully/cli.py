"""CLI for contentfully."""

import argparse
import logging
import sys

from contentfully.client import Contentfully
from contentfully.config import ClientSettings
from contentfully.domain.models import ContentfullyOptions, QueryOptions
from contentfully.output.json_dumper import dump_models, dumps
from contentfully.transport.backoff import ExponentialBackoffHandler
from contentfully.transport.cma_client import CMAClient
from contentfully.transport.contentful_client import ContentfulClient
from contentfully.transport.errors import ContentfulError


def build_contentfully(args: argparse.Namespace) -> Contentfully:
    """Create the facade from CLI arguments (falling back to CONTENTFUL_* env vars)."""
    settings = ClientSettings.from_env(
        access_token=args.token,
        space_id=args.space,
        environment_id=args.env,
        preview=True if args.preview else None,
    )
    if not settings.access_token or not settings.space_id:
        raise ValueError("an access token and space id are required (--token/--space)")
    if getattr(args, 'management', False):
        client = CMAClient.from_token(settings.access_token, settings.space_id, settings.environment_id)
    else:
        client = ContentfulClient(settings, rate_limit_strategy=ExponentialBackoffHandler())
    return Contentfully(client, ContentfullyOptions(experimental=args.experimental))


def _query_options(args: argparse.Namespace) -> QueryOptions:
    return QueryOptions(
        all_locales=args.all_locales or args.management,
        locale=args.locale,
        render_rich_text=args.render_rich_text,
    )


def get_models(contentfully: Contentfully, content_type: str, destination: str | None,
               options: QueryOptions, pretty: bool = True) -> int:
    """Fetch every entry of ``content_type``, printing or writing the models.

    Returns:
        Number of models fetched.
    """
    result = contentfully.get_entries({'content_type': content_type}, options)

    if isinstance(result.items, dict):
        count = sum(len(models) for models in result.items.values())
    else:
        count = len(result.items)

    if destination is None:
        print(dumps(result.items, pretty=pretty))
    elif isinstance(result.items, dict):
        for code, models in result.items.items():
            dump_models(models, f"{destination}/{code}", pretty=pretty)
    else:
        dump_models(result.items, destination, pretty=pretty)
    return count


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog='contentfully', description='Contentful model fetcher')
    parser.add_argument('-t', '--token', help='Delivery API access token (default: $CONTENTFUL_ACCESS_TOKEN)')
    parser.add_argument('-s', '--space', help='Space ID (default: $CONTENTFUL_SPACE_ID)')
    parser.add_argument('-e', '--env', help='Environment (default: master)')
    parser.add_argument('-p', '--preview', action='store_true', help='Use the preview API')
    parser.add_argument('-m', '--management', action='store_true',
                        help='Read through the Content Management API (implies --all-locales)')
    parser.add_argument('--all-locales', action='store_true', help='Fetch all locales and split models per locale')
    parser.add_argument('--locale', help='Fetch a single locale')
    parser.add_argument('--render-rich-text', action='store_true', help='Render rich text fields to HTML')
    parser.add_argument('--experimental', action='store_true', help='Use the _metadata model format')
    parser.add_argument('--no-pretty', action='store_true', help='Disable pretty printing')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command')

    # get-models command
    models_parser = subparsers.add_parser('get-models', help='Get all entries of a content type')
    models_parser.add_argument('type', help='Content type ID')
    models_parser.add_argument('destination', nargs='?', help='Output directory (prints to stdout if omitted)')

    # get-entry command
    entry_parser = subparsers.add_parser('get-entry', help='Get a single entry')
    entry_parser.add_argument('id', help='Entry ID')

    # locales command
    subparsers.add_parser('locales', help='List the space locales')

    # content-types command
    subparsers.add_parser('content-types', help='List the space content types')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if args.command is None:
        parser.print_help()
        return

    pretty = not args.no_pretty
    try:
        contentfully = build_contentfully(args)

        if args.command == 'get-models':
            if args.destination:
                print(f'Downloading all "{args.type}" models to "{args.destination}"...', file=sys.stderr)
            count = get_models(contentfully, args.type, args.destination, _query_options(args), pretty)
            print(f"Done! Fetched {count} models", file=sys.stderr)

        elif args.command == 'get-entry':
            print(dumps(contentfully.get_entry(args.id, _query_options(args)), pretty=pretty))

        elif args.command == 'locales':
            for locale in contentfully.client.get_locales().get('items') or []:
                marker = ' (default)' if locale.get('default') else ''
                print(f"  {locale.get('code')}{marker}")

        elif args.command == 'content-types':
            for content_type in contentfully.client.get_content_models().get('items') or []:
                print(f"  {content_type['sys']['id']}: {content_type.get('name', '')}")

    except (ContentfulError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
