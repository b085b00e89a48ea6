# run_tasks.py
import argparse
import os, sys

root_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if root_dir not in sys.path:
    sys.path.append(root_dir)

from careers_automation.automation.config import CLICK_STRATEGIES, OUTPUT_MODES, load_settings
from careers_automation.automation.main import run_automation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the careers site automation tasks and report their results.")
    parser.add_argument("--output-mode", choices=OUTPUT_MODES,
                        help="Print results to the console or append them to a file (default: OUTPUT_MODE or file)")
    parser.add_argument("--output-file", dest="output_file_path",
                        help="Result file used by the file output mode")
    parser.add_argument("--click-strategy", choices=CLICK_STRATEGIES,
                        help="Click with OS pointer events (synthetic) or through WebDriver (native)")
    parser.add_argument("--headless", action="store_true", default=None,
                        help="Run Chrome headless, implies --click-strategy native")
    parser.add_argument("--progress", dest="show_loading_bar", action="store_true", default=None,
                        help="Show progress bars")
    return parser


def main(argv=None) -> int:
    """
    Runs every task once.

    Returns:
        0 when every task succeeded, 1 otherwise
    """
    args = build_parser().parse_args(argv)
    settings = load_settings().with_overrides(**vars(args))
    results = run_automation(settings)
    return 0 if all(result.succeeded for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
