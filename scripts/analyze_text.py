#!/usr/bin/env python3
"""Analyze text for sentiment, keyword emotions and text statistics.

This script runs the same analysis as POST /api/text-emotion and prints the
result as JSON to stdout.

Usage:
    python scripts/analyze_text.py --text "I am so happy today!"
    python scripts/analyze_text.py --input notes.txt --match-mode token
    echo "What an awful day" | python scripts/analyze_text.py

Example output:
    {
        "score": 4,
        "comparative": 0.8,
        "emotion": {"joy": true, "sadness": false, "anger": false, "fear": false},
        "textAnalysis": {"wordCount": 5, "sentenceCount": 1, "averageWordLength": "4.00", "uniqueWords": 5}
    }
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from analysis import AnalysisConfig, analyze_transcript
from emotion import MATCH_MODES
from sentiment import SentimentScorer


def main() -> int:
    """Main entry point for the script.
    
    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = argparse.ArgumentParser(
        description="Analyze text for sentiment, emotions and statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s --text "I am so happy today!"
    %(prog)s --input notes.txt --pretty
    cat notes.txt | %(prog)s --match-mode token
        """,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--text", "-t",
        type=str,
        help="Text to analyze",
    )
    source.add_argument(
        "--input", "-i",
        type=str,
        help="Path to a UTF-8 text file to analyze (default: read stdin)",
    )
    parser.add_argument(
        "--match-mode", "-m",
        choices=MATCH_MODES,
        default="substring",
        help="Emotion keyword matching (default: substring)",
    )
    parser.add_argument(
        "--drop-empty-tokens",
        action="store_true",
        help="Exclude empty whitespace-split tokens from word counts",
    )
    parser.add_argument(
        "--include-transcript",
        action="store_true",
        help="Echo the analyzed text in the output",
    )
    parser.add_argument(
        "--pretty", "-p",
        action="store_true",
        help="Pretty-print JSON output with indentation",
    )
    
    args = parser.parse_args()
    
    if args.text is not None:
        text = args.text
    elif args.input is not None:
        input_path = Path(args.input)
        if not input_path.exists():
            print(json.dumps({
                "error": "File not found",
                "code": "FILE_NOT_FOUND",
                "path": str(input_path),
            }), file=sys.stderr)
            return 1
        text = input_path.read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()
    
    config = AnalysisConfig(
        match_mode=args.match_mode,
        drop_empty_tokens=args.drop_empty_tokens,
    )
    result = analyze_transcript(text, SentimentScorer(), config)
    
    output = result.to_dict()
    if args.include_transcript:
        output["transcript"] = result.transcript
    
    print(json.dumps(output, indent=2 if args.pretty else None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
