"""Command-line entrypoint: resolve a module selection and print coordinates."""

import argparse
import json
import logging
import sys

from fxdeps.common.http_client import HttpTransport
from fxdeps.common.logging_utils import configure_logging
from fxdeps.constants import Constants, ExitCodes, apply_config, load_config
from fxdeps.errors import CannotResolveVersion, TransportError, UnknownModule, UnsupportedPlatform
from fxdeps.modules import parse_module_list
from fxdeps.platforms import Architecture, Platform, running_architecture, running_platform
from fxdeps.processor import DependencyProcessor
from fxdeps.resolvers import RemoteIndexResolver, ResolverChain
from fxdeps.versioning.models import ResolutionRequest

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="fxdeps",
        description="Resolve JavaFX modules into platform-specific Maven coordinates",
        add_help=True,
    )
    parser.add_argument("-m", "--modules",
                        dest="MODULES",
                        help="Modules separated by ';', e.g. 'controls;fxml' or 'all'",
                        action="store", type=str,
                        default="base")
    parser.add_argument("-v", "--version",
                        dest="VERSION",
                        help="Literal version or special case such as '#latest#' or '#early#'",
                        action="store", type=str,
                        default=Constants.DEFAULT_VERSION)
    parser.add_argument("--platform",
                        dest="PLATFORM",
                        help="Target platform (linux, mac, windows, ...). Defaults to the host.",
                        action="store", type=str)
    parser.add_argument("--arch",
                        dest="ARCH",
                        help="Target architecture (x64, aarch64, ...). Defaults to the host.",
                        action="store", type=str)
    parser.add_argument("-C", "--configuration",
                        dest="CONFIGURATIONS",
                        help="Target build configuration; may be repeated",
                        action="append", type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to YAML configuration file",
                        action="store", type=str)
    parser.add_argument("--search-url",
                        dest="SEARCH_URL",
                        help="Search endpoint of the artifact index",
                        action="store", type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format",
                        action="store", type=str.lower,
                        choices=["text", "json"], default="text")
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level (defaults to $FXDEPS_LOG_LEVEL, then INFO)",
                        action="store", type=str,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        default=None)
    return parser.parse_args(argv)


def build_request(args) -> ResolutionRequest:
    """Translate parsed arguments into a ResolutionRequest.

    Raises:
        UnknownModule: For names outside the module catalog.
        UnsupportedPlatform: For unknown platform or architecture names.
    """
    platform = Platform.from_name(args.PLATFORM) if args.PLATFORM else running_platform()
    architecture = Architecture.from_name(args.ARCH) if args.ARCH else running_architecture()
    return ResolutionRequest(
        modules=parse_module_list(args.MODULES),
        version=args.VERSION,
        platform=platform,
        architecture=architecture,
        configurations=tuple(args.CONFIGURATIONS or Constants.DEFAULT_CONFIGURATIONS),
    )


def main(argv=None) -> int:
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL)
    apply_config(load_config(args.CONFIG))

    try:
        request = build_request(args)
    except (UnknownModule, UnsupportedPlatform) as exc:
        logger.error("%s", exc)
        return ExitCodes.CONFIG_ERROR.value

    with HttpTransport() as transport:
        resolver = RemoteIndexResolver(transport=transport, search_url=args.SEARCH_URL)
        processor = DependencyProcessor(ResolverChain([resolver]))
        try:
            coordinates = processor.coordinates_for(request)
        except UnsupportedPlatform as exc:
            logger.error("%s", exc)
            return ExitCodes.CONFIG_ERROR.value
        except CannotResolveVersion as exc:
            logger.error("%s", exc)
            if isinstance(exc.cause, TransportError):
                return ExitCodes.CONNECTION_ERROR.value
            return ExitCodes.RESOLUTION_ERROR.value

    if args.OUTPUT_FORMAT == "json":
        json.dump({"configurations": list(request.configurations), "dependencies": coordinates},
                  sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        for notation in coordinates:
            print(notation)
    return ExitCodes.SUCCESS.value


if __name__ == "__main__":
    sys.exit(main())
