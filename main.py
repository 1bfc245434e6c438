import sys
import traceback
from datetime import datetime

from docsim.doc_loading import (
    UnsupportedEncodingError,
    load_document_text,
)
from docsim.parse_text import extract_text
from docsim.report import ComparisonReport
from docsim.self_check import run_self_check
from docsim.similarity import compare

USAGE = (
    "Usage: docsim <source path> <target path> <output path> [--html]\n"
    "Self check: docsim verify"
)


def check_arguments(args: list[str]) -> bool:
    if len(args) != 3:
        print("Wrong number of arguments!", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return False

    for i, arg in enumerate(args):
        if arg is None or not arg.strip():
            print(f"Error: argument {i + 1} must not be empty", file=sys.stderr)
            return False

    return True


def compare_files(
    source_path: str, target_path: str, output_path: str, html: bool = False
) -> ComparisonReport:
    started_at = datetime.now()

    # prints for visibility
    print("[1/4] Loading documents...")
    source_text = load_document_text(source_path)
    target_text = load_document_text(target_path)
    print(f"\tSource: {source_path} ({len(source_text)} chars)")
    print(f"\tTarget: {target_path} ({len(target_text)} chars)")

    if html:
        print("\tStripping HTML markup")
        source_text = extract_text(source_text)
        target_text = extract_text(target_text)

    print("[2/4] Fingerprinting and comparing...")
    result = compare(source_text, target_text)
    print(f"\tDifference score: {result.difference_score}")

    print("[3/4] Writing report...")
    report = ComparisonReport(
        source_path=source_path,
        target_path=target_path,
        started_at=started_at,
        finished_at=datetime.now(),
        result=result,
    )
    report.write(output_path)

    print("[4/4] Done\n")
    return report


def main(args: list[str]) -> int:
    if len(args) == 1 and args[0] == "verify":
        return 1 if run_self_check() else 0

    html = "--html" in args
    args = [arg for arg in args if arg != "--html"]
    if not check_arguments(args):
        return 2

    source_path, target_path, output_path = args
    try:
        report = compare_files(source_path, target_path, output_path, html=html)
    except FileNotFoundError as e:
        print(f"File not found: {e}", file=sys.stderr)
    except UnsupportedEncodingError as e:
        print(f"Unsupported encoding: {e}", file=sys.stderr)
    except OSError as e:
        print(f"File processing error: {e}", file=sys.stderr)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        traceback.print_exc()
    else:
        print(report.summary(output_path))
        return 0
    return 1


def run() -> None:
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
