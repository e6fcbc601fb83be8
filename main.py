"""
Main entry point for the rwanda_geo command-line tool.

This script provides a command-line interface for looking up, navigating,
searching and validating Rwanda's administrative hierarchy. Results are
printed to stdout as JSON; logs go to stderr.
"""

import argparse
import json
import sys

from rwanda_geo.config import GeoConfig, DEFAULT_DATA_DIRECTORY
from rwanda_geo.engine import GeoEngine
from rwanda_geo.exceptions import ConfigurationError, DataLoadError, FileAccessError
from rwanda_geo.hierarchy.code_scheme import CODE_SCHEMES, DEFAULT_CODE_SCHEME
from rwanda_geo.logging_config import setup_logging


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Rwanda Geo - Query Rwanda's administrative hierarchy"
    )

    parser.add_argument(
        "--data-dir",
        default=DEFAULT_DATA_DIRECTORY,
        help="Directory holding provinces/districts/sectors/cells/villages JSON files"
    )

    parser.add_argument(
        "--code-scheme",
        choices=sorted(CODE_SCHEMES),
        default=DEFAULT_CODE_SCHEME,
        help=f"Code segmentation scheme (default: {DEFAULT_CODE_SCHEME})"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    parser.add_argument(
        "--log-file",
        help="Optional file to append logs to"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in [
        ("lookup", "Show the unit with this code"),
        ("hierarchy", "Show the ancestor chain of a unit, province first"),
        ("children", "Show the direct children of a unit"),
        ("siblings", "Show units sharing the parent of a unit"),
        ("descendants", "Show every unit below a unit"),
        ("validate-code", "Check a code against the code scheme"),
    ]:
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("code", help="Administrative unit code")

    search = subparsers.add_parser("search", help="Substring search over names or slugs")
    search.add_argument("text", help="Text to look for")
    search.add_argument("--field", choices=["name", "slug"], default="name",
                        help="Field to search (default: name)")

    partial = subparsers.add_parser("partial-code", help="Find units whose code contains a fragment")
    partial.add_argument("fragment", help="Code fragment")
    partial.add_argument("--limit", type=int, default=10, help="Maximum results (default: 10)")

    fuzzy = subparsers.add_parser("fuzzy", help="Fuzzy name search by edit distance")
    fuzzy.add_argument("query", help="Name to look for")
    fuzzy.add_argument("--max-distance", type=int, default=3,
                       help="Maximum edit distance (default: 3)")
    fuzzy.add_argument("--limit", type=int, default=10, help="Maximum results (default: 10)")

    suggest = subparsers.add_parser("suggest", help="Ranked suggestions for a query")
    suggest.add_argument("query", help="Free-text query")
    suggest.add_argument("--limit", type=int, default=10, help="Maximum results (default: 10)")

    relationship = subparsers.add_parser("validate-relationship",
                                         help="Check that one unit is the direct parent of another")
    relationship.add_argument("parent_code", help="Parent unit code")
    relationship.add_argument("child_code", help="Child unit code")

    audit = subparsers.add_parser("audit", help="Audit the integrity of the whole dataset")
    audit.add_argument("--progress", action="store_true", help="Show a progress bar")
    audit.add_argument("--max-issues", type=int, default=50,
                       help="Maximum issues to print (default: 50)")

    subparsers.add_parser("summary", help="Show unit counts per level")

    return parser.parse_args(argv)


def _units(units):
    return [unit.to_dict() for unit in units]


def run_command(engine: GeoEngine, args, logger=None) -> int:
    """Execute one subcommand, print its JSON result and return the exit code."""
    navigator = engine.navigator
    search = engine.search
    validator = engine.validator
    exit_code = 0

    if args.command == "lookup":
        unit = engine.index.lookup(args.code)
        result = unit.to_dict() if unit else None
    elif args.command == "hierarchy":
        result = _units(navigator.ancestor_chain(args.code))
    elif args.command == "children":
        result = _units(navigator.direct_children(args.code))
    elif args.command == "siblings":
        result = _units(navigator.siblings(args.code))
    elif args.command == "descendants":
        result = _units(navigator.descendants(args.code))
    elif args.command == "search":
        if args.field == "slug":
            result = _units(search.search_by_slug(args.text))
        else:
            result = _units(search.search_by_name(args.text))
    elif args.command == "partial-code":
        result = _units(search.search_by_partial_code(args.fragment, args.limit))
    elif args.command == "fuzzy":
        matches = search.fuzzy_search_by_name(args.query, args.max_distance, args.limit)
        result = [match.to_dict() for match in matches]
    elif args.command == "suggest":
        result = [suggestion.to_dict() for suggestion in search.get_suggestions(args.query, args.limit)]
    elif args.command == "validate-code":
        result = validator.validate_code_format(args.code).to_dict()
    elif args.command == "validate-relationship":
        result = validator.validate_parent_child(args.parent_code, args.child_code).to_dict()
    elif args.command == "audit":
        report = validator.audit_hierarchy(show_progress=args.progress)
        result = report.to_dict()
        result['issues'] = result['issues'][:max(args.max_issues, 0)]
        exit_code = 0 if report.valid else 2
        if logger:
            logger.log_audit_summary(report)
    else:
        result = engine.store.counts()

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return exit_code


def main(argv=None):
    """Main application entry point."""
    args = parse_arguments(argv)

    try:
        config = GeoConfig(
            data_directory=args.data_dir,
            code_scheme=args.code_scheme,
            log_level=args.log_level,
            log_file=args.log_file
        )
        logger = setup_logging(config)
        logger.debug(f"Configuration: {config.to_dict()}")

        engine = GeoEngine.from_config(config, logger=logger.logger)
        sys.exit(run_command(engine, args, logger))

    except ConfigurationError as e:
        print(f"\nConfiguration Error: {e}", file=sys.stderr)
        sys.exit(1)

    except (FileAccessError, DataLoadError) as e:
        print(f"\nData Error: {e}", file=sys.stderr)
        print("Please check that all record files exist and are readable.", file=sys.stderr)
        sys.exit(4)

    except KeyboardInterrupt:
        print("\nProcess interrupted by user", file=sys.stderr)
        sys.exit(130)

    except Exception as e:
        print(f"\nError: Unexpected error: {e}", file=sys.stderr)
        print("Please check the log files for more details.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
