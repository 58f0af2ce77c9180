import sys
import json
import logging
import argparse

from core.config_loader import load_config
from core.app_context import AppContext
from core.schema import SchemaError, SchemaLookupError
from core.scorer import WorkerRequest

logger = logging.getLogger(__name__)


def configure_logging(level: str, fmt: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=fmt
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Coefficient schema scoring service")
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config.yaml (default: $APP_CONFIG or ./config.yaml)')

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('serve', help='Run the HTTP API')
    subparsers.add_parser('validate', help='Load the schema and print a summary')

    recommend = subparsers.add_parser('recommend', help='Recommend vacancies for skills')
    recommend.add_argument('--name', type=str, default='candidate', help='Candidate name')
    recommend.add_argument('--skills', type=str, nargs='+', required=True,
                           help='Skill names from the schema')
    recommend.add_argument('--ranked', action='store_true',
                           help='Order vacancies by score instead of by name')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    configure_logging(config.logging.level, config.logging.format)

    try:
        context = AppContext.build(config)
    except SchemaError as e:
        logger.error(f"Could not load coefficient schema: {e}")
        return 1

    if args.command == 'serve':
        from web.backend.app import main as serve
        serve(context)
        return 0

    if args.command == 'validate':
        print(json.dumps(context.schema.summary(), indent=2))
        return 0

    if args.command == 'recommend':
        worker = WorkerRequest(name=args.name, skills=args.skills)
        try:
            response = context.scoring_service.recommend(worker, ranked=args.ranked)
        except SchemaLookupError as e:
            logger.error(str(e))
            return 1

        vacancies = response.ranking if args.ranked else list(response.vacancies.items())
        print(json.dumps({'name': response.name, 'vacancies': vacancies}, ensure_ascii=False, indent=2))
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
