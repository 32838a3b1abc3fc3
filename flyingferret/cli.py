#!/usr/bin/env python3
"""
flyingferret CLI — ask the ferret.

Every command has a ferret name and a standard alias:

    FERRET          STANDARD        WHAT IT DOES
    ------          --------        ----------------------------------
    ask             transform       Answer a line locally and print it
    ring            remote          Ask a running flyingferret server
    dial            start, serve    Start the flyingferret HTTP server
    tone            banner          Print the flyingferret banner

Examples:
    flyingferret ask should I stay or should I go?
    flyingferret ask 3d6+2 and d20
    flyingferret ring --url http://ferret.local:8000 roll pigs
"""

import argparse
import sys

from flyingferret import __version__

BANNER = r"""
    ╔══════════════════════════════════════════════════╗
    ║                                                  ║
    ║   f l y i n g   f e r r e t                      ║
    ║                                                  ║
    ║   Dice, decisions and answers.           v""" + __version__ + r"""  ║
    ║                                                  ║
    ╚══════════════════════════════════════════════════╝
"""

DEFAULT_QUESTION = "should I buy SC 2 when it comes out?"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_ask(args) -> int:
    """Transform the given words locally and print each reply line."""
    from flyingferret.responder import Responder
    from flyingferret.rng import make_rng

    text = " ".join(args.words) if args.words else DEFAULT_QUESTION
    responder = Responder(rng=make_rng(args.seed))
    lines = responder.transform(text)

    if args.verbose:
        print(f"'{text}' transforms into this:")
    for line in lines:
        print(line)
    return 0


def cmd_ring(args) -> int:
    """Send the words to a running flyingferret server and print the results."""
    import httpx
    from flyingferret.config import get_config

    cfg = get_config()
    client_cfg = cfg.get("client", {})
    url = (args.url or client_cfg.get("url") or "http://localhost:8000").rstrip("/")
    text = " ".join(args.words).strip()

    try:
        resp = httpx.post(
            f"{url}/api/v1/transform",
            data={"q": text},
            timeout=client_cfg.get("timeout", 10),
        )
        resp.raise_for_status()
    except httpx.ConnectError:
        print(f"  ✗  Dead line — nothing at {url}", file=sys.stderr)
        return 1
    except httpx.HTTPError as e:
        print(f"  ✗  Error: {e}", file=sys.stderr)
        return 1

    for line in resp.json().get("results", []):
        print(line)
    return 0


def cmd_dial(args) -> int:
    """Start the flyingferret HTTP server."""
    import uvicorn
    from flyingferret.config import get_config

    cfg = get_config()
    host = args.host or cfg["server"]["host"]
    port = args.port or cfg["server"]["port"]

    print(BANNER)
    print(f"  Dialing up on {host}:{port}")
    print()

    uvicorn.run(
        "flyingferret.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level="info",
    )
    return 0


def cmd_tone(args) -> int:
    """Print the banner."""
    print(BANNER)
    return 0


# ---------------------------------------------------------------------------
# Parser with aliases
# ---------------------------------------------------------------------------

def _add_command(subparsers, names, help_text, func, setup_fn=None):
    """Register a command under multiple names (ferret + standard)."""
    p = subparsers.add_parser(names[0], help=help_text, aliases=names[1:])
    p.set_defaults(func=func)
    if setup_fn:
        setup_fn(p)
    return p


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flyingferret",
        description="flyingferret — dice, decisions and answers.",
        epilog=(
            "Each command has a ferret name and standard aliases.\n"
            "Example: 'flyingferret ask' and 'flyingferret transform' do the same thing.\n"
            "Run 'flyingferret <command> --help' for command-specific options."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V", action="version",
        version=f"flyingferret {__version__}",
    )

    sub = parser.add_subparsers(dest="command", metavar="<command>")

    # ask / transform
    def setup_ask(p):
        p.add_argument("words", nargs="*", help="The line to answer (words are joined with spaces)")
        p.add_argument("--seed", "-s", type=int, default=None, help="Seed for reproducible output")
        p.add_argument("--verbose", "-v", action="store_true", help="Echo the input before the reply")

    _add_command(sub, ["ask", "transform"],
                 "Answer a line locally", cmd_ask, setup_ask)

    # ring / remote
    def setup_ring(p):
        p.add_argument("words", nargs="+", help="The line to answer")
        p.add_argument("--url", "-u", default=None, help="Server URL (default: client.url from config)")

    _add_command(sub, ["ring", "remote"],
                 "Ask a running flyingferret server", cmd_ring, setup_ring)

    # dial / start / serve
    def setup_dial(p):
        p.add_argument("--host", default=None, help="Override listen host")
        p.add_argument("--port", "-p", type=int, default=None, help="Override listen port")
        p.add_argument("--reload", action="store_true", help="Auto-reload on code changes (dev)")

    _add_command(sub, ["dial", "start", "serve"],
                 "Start the flyingferret HTTP server", cmd_dial, setup_dial)

    # tone / banner
    _add_command(sub, ["tone", "banner"],
                 "Print the flyingferret banner", cmd_tone)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        cmd_tone(args)
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
