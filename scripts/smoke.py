# scripts/smoke.py
"""
Smoke test script for the computerese pipelines.

Runs extract -> validate-canonical -> convert -> validate-outputs end to end
inside a temporary directory and prints what each step reported.

Usage
-----
1. Test with the built-in three-letter sample README:
    $ python scripts/smoke.py

2. Test with a real glossary README, including the PDF renderer:
    $ python scripts/smoke.py --readme README.md --pdf
"""

import argparse
import logging
import sys
import tempfile
import traceback
from pathlib import Path

from dotenv import load_dotenv

from computerese.pipelines import (
    run_check_words,
    run_convert,
    run_extract,
    run_validate_canonical,
    run_validate_outputs,
)

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #
env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)
    print("✅ Loaded .env file")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
DEFAULT_README = """\
# 计算机专业术语对照

## A

| English | 中文 |
| ------- | ---- |
| abstract | 抽象的 |
| access | 访问<sup>1</sup> |

## B

| English | 中文 |
| ------- | ---- |
| bit | 二进制位 |

# 注释

[1] 示例注释。
"""


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run computerese smoke test")
    parser.add_argument("--readme", "-r", type=str, help="Path to a glossary README.md")
    parser.add_argument("--pdf", action="store_true", help="Also render PDF (needs Chromium)")
    args = parser.parse_args()

    with tempfile.TemporaryDirectory(prefix="computerese-smoke-") as tmp:
        work = Path(tmp)

        # 1. Prepare input
        if args.readme:
            readme = Path(args.readme)
            if not readme.exists():
                print(f"❌ File not found: {readme}")
                return
            print(f"\n📂 Using README: {readme}")
        else:
            readme = work / "README.md"
            readme.write_text(DEFAULT_README, encoding="utf-8")
            print("\n📝 Using built-in sample README (no --readme provided)")

        data = work / "data.yaml"
        dist = work / "pkg"
        formats = ["csv", "markdown", "html", "docx"] + (["pdf"] if args.pdf else [])

        # 2. Execution
        try:
            extracted = run_extract(readme, data)
            canonical = run_validate_canonical(readme, data)
            converted = run_convert(data, dist, formats)
            outputs = run_validate_outputs(data, dist, formats)
            words = run_check_words(readme, data)
        except Exception as exc:
            print(f"\n❌ Pipeline crashed: {exc}")
            traceback.print_exc()
            return

        # 3. Inspection
        print("\n" + "=" * 60)
        print(f"📝 Extracted {extracted.total_terms} terms, {extracted.footnotes} footnotes")
        print("=" * 60)

        print("\n🔎 Canonical checks:")
        for line in canonical.checks:
            print(f"  {'✓' if line.passed else '✗'} {line.name}: {line.message}")

        print(f"\n📦 Converted {converted.succeeded}/{len(converted.formats)} formats:")
        for line in converted.results:
            print(f"  {'✓' if line.passed else '✗'} {line.name}: {line.message}")

        print("\n🧾 Artifact checks:")
        for line in outputs.results:
            print(f"  {'✓' if line.passed else '✗'} {line.name}: {line.message}")

        print(f"\n🔗 Words found in README: {len(words.crossref.found)}/{words.crossref.total}")


if __name__ == "__main__":
    main()
