import argparse
import logging
import os
import sys

from rich.markup import escape

from apache_node_proxy.branding import VERSION, console, cx_header, cx_print
from apache_node_proxy.collector import (
    DEFAULT_APP_NAME,
    DEFAULT_PORT,
    collect_from_options,
    collect_interactive,
)
from apache_node_proxy.config.exceptions import ProxyError
from apache_node_proxy.config.validators import validate_port
from apache_node_proxy.preview import render_preview
from apache_node_proxy.settings import ProxySettings
from apache_node_proxy.workflow import Configurator

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _add_target_options(parser: argparse.ArgumentParser):
    parser.add_argument("-p", "--path", default=os.getcwd(), help="Project path")
    parser.add_argument("-P", "--port", default=str(DEFAULT_PORT), help="Application port")
    parser.add_argument("-n", "--name", default=DEFAULT_APP_NAME, help="Application name")
    parser.add_argument(
        "--no-https",
        dest="https",
        action="store_false",
        help="Disable HTTPS configuration",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apache-node-proxy",
        description="Configure Apache virtual hosts for Node.js applications",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sudo apache-node-proxy                                  # Interactive setup
  sudo apache-node-proxy quick -p /opt/bitnami/projects/app -P 3000 -n app
  sudo apache-node-proxy quick --predefined               # Enable Bitnami samples
  apache-node-proxy preview -n app -o ./test-output       # Render without installing

Environment Variables:
  APACHE_NODE_PROXY_BASE_DIR         Bitnami base directory (/opt/bitnami)
  APACHE_NODE_PROXY_CONF_DIR         Apache conf directory
  APACHE_NODE_PROXY_VHOSTS_DIR       Apache vhosts directory
  APACHE_NODE_PROXY_RESTART_COMMAND  Command used to restart Apache
        """,
    )
    parser.add_argument(
        "--version", "-V", action="version", version=f"apache-node-proxy {VERSION}"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show detailed output")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    quick_parser = subparsers.add_parser("quick", help="Quick setup with default values")
    _add_target_options(quick_parser)
    quick_parser.add_argument(
        "--predefined",
        action="store_true",
        help="Enable the predefined sample virtual hosts instead of custom ones",
    )

    preview_parser = subparsers.add_parser(
        "preview", help="Render virtual hosts without installing them"
    )
    _add_target_options(preview_parser)
    preview_parser.add_argument(
        "-o", "--output-dir", help="Also write the rendered files to this directory"
    )

    return parser


def run_quick(args, settings: ProxySettings) -> int:
    configurator = Configurator(settings)
    return configurator.run(
        lambda: collect_from_options(
            path=args.path,
            port=args.port,
            name=args.name,
            https=args.https,
            predefined=args.predefined,
        )
    )


def run_preview(args, settings: ProxySettings) -> int:
    try:
        port = validate_port(args.port)
        rendered = render_preview(
            project_path=args.path,
            port=port,
            app_name=args.name,
            use_https=args.https,
            settings=settings,
            output_dir=args.output_dir,
        )
    except ProxyError as e:
        cx_print(f"Error: {e}", "error")
        return 1

    for name, content in rendered.items():
        cx_header(f"📋 {name}")
        console.print(escape(content), style="dim", highlight=False)

    if args.output_dir:
        cx_print(f"Preview written to {args.output_dir}", "success")

    console.print("\n[yellow]💡 To apply with Apache:[/yellow]")
    console.print(f"   1. Copy the generated configs to {settings.vhosts_dir}/", highlight=False)
    console.print(f"   2. Restart Apache: sudo {settings.restart_command}", highlight=False)
    console.print(
        f"   3. Ensure your Node.js app is running on port {port}", highlight=False
    )
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    settings = ProxySettings.from_env()
    logger.debug("Settings: %s", settings)

    try:
        if args.command == "quick":
            return run_quick(args, settings)
        elif args.command == "preview":
            return run_preview(args, settings)
        else:
            return Configurator(settings).run(collect_interactive)
    except (KeyboardInterrupt, EOFError):
        print("\n❌ Operation cancelled", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
