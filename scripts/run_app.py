#!/usr/bin/env python
"""
Launch the ticket calculator in Streamlit.

Usage:
    python scripts/run_app.py
    python scripts/run_app.py --catalog my_museums.csv --reset-on-select
    python scripts/run_app.py --port 8600 -- --theme.base dark

Calculator options are handed to the app as MUSEUM_TICKETS_* environment
variables; anything after them is passed straight to `streamlit run`.
"""
import argparse
import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
UI_PATH = PROJECT_ROOT / 'src' / 'museum_tickets' / 'ui' / 'app_streamlit.py'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the NYC museum ticket calculator")
    parser.add_argument('--catalog', type=Path, help="Museum price CSV to load instead of the packaged one")
    parser.add_argument('--currency', help="Currency symbol shown in prices")
    parser.add_argument('--reset-on-select', action='store_true',
                        help="Zero visitor counts whenever a different museum is picked")
    parser.add_argument('--port', type=int, help="Port for the Streamlit server")
    return parser


def build_command(argv=None, environ=None) -> tuple[list[str], dict[str, str]]:
    """Translate launcher arguments into the streamlit command and its environment."""
    args, streamlit_args = build_parser().parse_known_args(argv)
    if streamlit_args and streamlit_args[0] == '--':
        streamlit_args = streamlit_args[1:]

    env = dict(os.environ if environ is None else environ)
    src_path = str(PROJECT_ROOT / 'src')
    env['PYTHONPATH'] = os.pathsep.join(p for p in (src_path, env.get('PYTHONPATH')) if p)

    if args.catalog:
        env['MUSEUM_TICKETS_CATALOG'] = str(args.catalog.resolve())
    if args.currency:
        env['MUSEUM_TICKETS_CURRENCY_SYMBOL'] = args.currency
    if args.reset_on_select:
        env['MUSEUM_TICKETS_RESET_COUNTS_ON_SELECT'] = 'true'

    cmd = [sys.executable, '-m', 'streamlit', 'run', str(UI_PATH)]
    if args.port:
        cmd += ['--server.port', str(args.port)]
    cmd += streamlit_args
    return cmd, env


def main(argv=None) -> int:
    if not UI_PATH.exists():
        print(f"ERROR: UI module not found at {UI_PATH}")
        return 1

    cmd, env = build_command(argv)
    if 'MUSEUM_TICKETS_CATALOG' in env and not Path(env['MUSEUM_TICKETS_CATALOG']).exists():
        print(f"ERROR: Museum catalog not found at {env['MUSEUM_TICKETS_CATALOG']}")
        return 1

    print(f"Starting Streamlit: {' '.join(cmd)}")
    try:
        return subprocess.run(cmd, cwd=str(PROJECT_ROOT), env=env).returncode
    except KeyboardInterrupt:
        print("\nCalculator stopped.")
        return 0


if __name__ == "__main__":
    sys.exit(main())
