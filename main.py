"""
Main entry point for importing work breakdowns into GanttPRO
"""
import sys
import json
import argparse

from clients import GanttProClient
from errors import ConfigurationError, ProjectCreationError, ValidationError
from importers import import_to_ganttpro
from transformers import parse_import_request
from utils import logger


def import_file(client, path):
    """
    Import a single JSON work-breakdown file

    Args:
        client: Initialized GanttPRO client
        path: Path to a JSON file with 'projectName' and 'tasks'

    Returns:
        dict: 'success' (bool), 'file', and either 'summary' (response document) or 'error'
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"✗ Could not read {path}: {e}")
        return {'success': False, 'file': path, 'error': str(e)}

    try:
        import_request = parse_import_request(payload)
    except ValidationError as e:
        logger.error(f"✗ Invalid work breakdown in {path}: {e.message}")
        return {'success': False, 'file': path, 'error': e.message}

    try:
        summary = import_to_ganttpro(client, import_request)
    except ProjectCreationError as e:
        logger.error(f"✗ Project creation failed for {path}: {e.message}")
        return {'success': False, 'file': path, 'error': e.message, 'details': e.to_dict()}

    summary.print_summary()
    return {'success': True, 'file': path, 'summary': summary.to_response()}


def main(argv=None):
    """Main execution function"""
    parser = argparse.ArgumentParser(
        description='Import work breakdowns into GanttPRO',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py site_launch.json
  python main.py a.json b.json --output results.json
  python main.py --serve
        """
    )
    parser.add_argument(
        'files',
        nargs='*',
        help='One or more JSON files with "projectName" and "tasks"'
    )
    parser.add_argument('--output', help='Write the import results to this JSON file')
    parser.add_argument('--serve', action='store_true', help='Run the HTTP import endpoint')
    args = parser.parse_args(argv)

    if args.serve:
        from server import run_server
        run_server()
        return 0

    if not args.files:
        parser.error("no input files given (or use --serve)")

    try:
        client = GanttProClient()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        logger.error("\nPlease ensure your .env file contains GANTTPRO_API_KEY.")
        return 1

    all_results = []
    for idx, path in enumerate(args.files, 1):
        logger.info(f"\n{'#'*60}")
        logger.info(f"FILE {idx}/{len(args.files)}: {path}")
        logger.info(f"{'#'*60}")
        all_results.append(import_file(client, path))

    logger.info(f"\n{'='*60}")
    logger.info("OVERALL IMPORT SUMMARY")
    logger.info(f"{'='*60}")
    successful = sum(1 for r in all_results if r['success'])
    logger.info(f"Total files: {len(all_results)}")
    logger.info(f"  ✓ Successful: {successful}")
    logger.info(f"  ✗ Failed: {len(all_results) - successful}")
    for idx, result in enumerate(all_results, 1):
        status = "✓" if result['success'] else "✗"
        logger.info(f"  {idx}. {status} {result['file']}")
        if result['success']:
            logger.info(f"       {result['summary']['message']}")
        else:
            logger.info(f"       Error: {result['error']}")

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump(all_results, f, indent=2, default=str)
        logger.info(f"✓ Results saved to: {args.output}")

    return 0 if successful == len(all_results) else 1


if __name__ == '__main__':
    sys.exit(main())
