"""
Command-line interface: Markdown → HTML, optionally translated
"""
import os
import sys
import asyncio
import argparse
import logging

from markdown_translator.config import DEFAULT_DOCUMENT_TITLE
from markdown_translator.core import CredentialSet, Direction, TranslationRequest, TranslationService
from markdown_translator.core.exceptions import ClassifiedTranslationError, MarkdownFetchError
from markdown_translator.core.models import OPENAI, GOOGLE_TRANSLATE
from markdown_translator.rendering import convert_markdown_to_html, fetch_markdown


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert a Markdown file to styled HTML and optionally translate it (Japanese ⇄ English).")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-i", "--input", help="Path to the input Markdown file.")
    source.add_argument("--url", help="URL of a Markdown file to fetch.")
    parser.add_argument("-o", "--output", default=None, help="Path to the output HTML file. If not specified, uses the input name with .html.")
    parser.add_argument("--title", default=None, help=f"Document title (default: {DEFAULT_DOCUMENT_TITLE}).")
    parser.add_argument("--translate", choices=[d.value for d in Direction], default=None, help="Translate the generated HTML in this direction.")
    parser.add_argument("--openai_api_key", default=os.getenv('OPENAI_API_KEY', ''), help="OpenAI API key (default: $OPENAI_API_KEY).")
    parser.add_argument("--google_translate_api_key", default=os.getenv('GOOGLE_TRANSLATE_API_KEY', ''), help="Google Translate API key (default: $GOOGLE_TRANSLATE_API_KEY).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def default_output_path(stem: str, direction) -> str:
    if direction is None:
        return f"{stem}.html"
    return f"{stem}_{Direction(direction).target_code}.html"


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.input:
        try:
            with open(args.input, 'r', encoding='utf-8') as f:
                markdown_text = f.read()
        except OSError as e:
            print(f"Error: cannot read {args.input}: {e.strerror or e}", file=sys.stderr)
            return 1
        stem = os.path.splitext(args.input)[0]
    else:
        try:
            fetched = fetch_markdown(args.url)
        except MarkdownFetchError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1
        markdown_text = fetched.content
        stem = fetched.filename

    html = convert_markdown_to_html(markdown_text, title=args.title or DEFAULT_DOCUMENT_TITLE)

    if args.translate:
        request = TranslationRequest(
            content=html,
            direction=Direction(args.translate),
            credentials=CredentialSet({
                OPENAI: args.openai_api_key,
                GOOGLE_TRANSLATE: args.google_translate_api_key,
            })
        )
        try:
            html = asyncio.run(TranslationService().translate_or_raise(request)).translated_content
        except ClassifiedTranslationError as e:
            print(f"{e.error.title}\n\n{e.error.detail}", file=sys.stderr)
            return 1

    output_path = args.output or default_output_path(stem, args.translate)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(html)

    print(f"Wrote {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
