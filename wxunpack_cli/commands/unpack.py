"""
wxunpack CLI - Unpack Command
Usage: python -m wxunpack_cli.commands.unpack <packedDir|packedFile> [options]
"""
import argparse
import sys
import time
from pathlib import Path
from wxunpack.config import config, UnpackConfig
from wxunpack.unpacker.decoder import DecoderNotConfigured, DecoderLoadError
from wxunpack.unpacker.discovery import PackageDiscovery
from wxunpack.unpacker.finalizer import PluginInjector, ConfigWriter
from wxunpack.unpacker.unpacker import Unpacker
from wxunpack.utils.logger import logger, set_verbose


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wxunpack",
        description="Unpack .wxapkg archives and merge them into one project"
    )
    parser.add_argument("input", nargs="?", help="Packed .wxapkg file or directory of them")
    parser.add_argument("--keep-old", action="store_true",
                        help="Do not remove previously unpacked output")
    parser.add_argument("--include-framework", action="store_true",
                        help="Also unpack the bundled runtime framework archives")
    parser.add_argument("--decoder", default=None,
                        help="Archive decoder as module:callable (default: from config)")
    parser.add_argument("--list", action="store_true",
                        help="List the archives that would be unpacked and exit")
    parser.add_argument("-c", "--config", default=None,
                        help="Path to a wxunpack.config.json")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print every pipeline step")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.input:
        print(f"Usage: {parser.prog} <packedDir|packedFile>")
        sys.exit(0)

    if args.verbose:
        set_verbose(True)

    cfg = UnpackConfig(args.config) if args.config else config
    filterable_framework = not args.include_framework and cfg.filterable_framework
    discovery = PackageDiscovery(cfg.archive_ext, cfg.framework_names)

    input_path = Path(args.input)

    if args.list:
        for candidate in discovery.discover(str(input_path), filterable_framework):
            print(candidate)
        sys.exit(0)

    try:
        unpacker = Unpacker(
            decoder=args.decoder or cfg.decoder,
            discovery=discovery,
            plugin_injector=PluginInjector(cfg.entry_script, cfg.plugin_require),
            config_writer=ConfigWriter(cfg.project_config_name, cfg.project_config_description)
        )
    except (DecoderNotConfigured, DecoderLoadError) as e:
        logger.error(str(e))
        sys.exit(1)

    start_time = time.time()
    try:
        result = unpacker.unpack_wxapkg(
            str(input_path),
            clean_old=cfg.clean_old and not args.keep_old,
            filterable_framework=filterable_framework
        )
    except KeyboardInterrupt:
        print("\n❌ Operation cancelled by user.")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)

    if result['success']:
        print(f"Unpack: {time.time() - start_time:.3f}s")
        if result['main_package']:
            print(f"✅ Main package: {result['main_package']}")


if __name__ == "__main__":
    main()
