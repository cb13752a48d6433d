# main.py
# Command-line entry point.
#
#   python main.py translate article.html --provider google --lang ja
#   python main.py blocks article.html
#   python main.py export article.html --title "Weekly notes"
#   python main.py summarize article.html --title "Weekly notes" --provider ollama

import argparse
import dataclasses
import json
import signal
import sys
import threading

from engine.block_emitter import html_to_blocks
from engine.config import EngineConfig
from engine.html_augmenter import HtmlAugmenter
from engine.html_classifier import parse_fragment
from engine.html_text import raw_text
from notion.client import NotionClient, NotionConfig
from notion.errors import ExportError
from summarizer.factory import SummarizerConfig, new_summarizer
from translator.factory import PROVIDERS, TranslatorConfig, new_translator
from utils.logger import log


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        return f.read()


def cancel_on_sigint() -> threading.Event:
    """First Ctrl+C stops further API calls; partial output is still printed."""
    cancel = threading.Event()

    def handler(signum, frame):
        log("CANCEL: interrupt received, finishing with partial output")
        cancel.set()
        signal.signal(signal.SIGINT, signal.default_int_handler)

    signal.signal(signal.SIGINT, handler)
    return cancel


def engine_config(args) -> EngineConfig:
    config = EngineConfig.from_env()
    if getattr(args, "lang", None):
        config = dataclasses.replace(config, target_language=args.lang)
    return config


def cmd_translate(args) -> int:
    config = engine_config(args)
    translator = new_translator(TranslatorConfig.from_env(args.provider, config.target_language))
    augmenter = HtmlAugmenter(translator, config, cancel=cancel_on_sigint())

    print(augmenter.translate_html(read_input(args.file)))
    return 0


def cmd_blocks(args) -> int:
    blocks = html_to_blocks(read_input(args.file), engine_config(args))
    print(json.dumps([b.to_notion() for b in blocks], ensure_ascii=False, indent=2))
    return 0


def cmd_export(args) -> int:
    client = NotionClient(NotionConfig.from_env(), engine_config(args))
    try:
        url = client.create_page(args.title, read_input(args.file), cancel=cancel_on_sigint())
    except ExportError as e:
        if e.page_created:
            log(f"EXPORT: partial page at {e.page_url} ({e.appended_batches} batches appended)")
        log(f"EXPORT FAILED: {e}")
        return 1

    print(url)
    return 0


def cmd_summarize(args) -> int:
    summarizer = new_summarizer(SummarizerConfig.from_env(args.provider))
    content = raw_text(parse_fragment(read_input(args.file))).strip()
    print(summarizer.summarize(args.title, content))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlblocks",
        description="Bilingual HTML augmentation and block export.",
    )
    subparsers = parser.add_subparsers(title="commands", metavar="<command>", dest="command")
    subparsers.required = True

    p = subparsers.add_parser("translate", help="Insert a translation after every block.")
    p.add_argument("file", help="HTML file, or - for stdin")
    p.add_argument("--provider", choices=PROVIDERS, default="google")
    p.add_argument("--lang", help="Target language (default: HTMLBLOCKS_TARGET_LANG or zh-CN)")
    p.set_defaults(func=cmd_translate)

    p = subparsers.add_parser("blocks", help="Print the export blocks as JSON.")
    p.add_argument("file", help="HTML file, or - for stdin")
    p.set_defaults(func=cmd_blocks)

    p = subparsers.add_parser("export", help="Create a Notion page from HTML.")
    p.add_argument("file", help="HTML file, or - for stdin")
    p.add_argument("--title", required=True)
    p.set_defaults(func=cmd_export)

    p = subparsers.add_parser("summarize", help="Summarize an article.")
    p.add_argument("file", help="HTML or text file, or - for stdin")
    p.add_argument("--title", default="")
    p.add_argument("--provider", choices=("gemini", "ollama"), default="gemini")
    p.set_defaults(func=cmd_summarize)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
