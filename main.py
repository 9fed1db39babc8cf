"""主程序入口 - 单值处理与CSV批量处理"""
import argparse
import logging
import sys

from config.config import *
from core import ExpressionError, StringProcessor, PasswordStrengthChecker
from data.data_loader import (
    load_text_dataset,
    check_missing_values,
    apply_processors_and_return_transformed
)
from utils.metrics import summarize_results

logger = logging.getLogger(__name__)


def setup_logging(level=None):
    logging.basicConfig(
        level=level or LOGGING_CONFIG['level'],
        format=LOGGING_CONFIG['format']
    )


def run_single(args, processor):
    """处理命令行直接给出的值，返回退出码"""
    exit_code = 0

    if args.expression is not None:
        try:
            result = processor.calculate_expression(args.expression)
            print(f"expression: {args.expression} = {result}")
        except ExpressionError as e:
            logger.error(f"Failed to evaluate expression: {e}")
            exit_code = 1

    if args.password is not None:
        report = PasswordStrengthChecker.check(args.password)
        print(f"strong password: {report.is_strong}")
        if not report.is_strong:
            print(f"missing: {', '.join(report.missing_requirements())}")

    if args.text is not None:
        print(f"digits: {processor.calculate_digits(args.text)}")
        print(f"words: {processor.calculate_words(args.text)}")

    return exit_code


def run_batch(args):
    """CSV批量处理"""
    logger.info("=== Batch processing ===")
    columns = [c for c in (args.text_column, args.password_column, args.expression_column) if c]
    dataset = load_text_dataset(args.data_path, columns)
    check_missing_values(dataset, 'input')

    transformed = apply_processors_and_return_transformed(
        dataset,
        text_column=args.text_column,
        password_column=args.password_column,
        expression_column=args.expression_column
    )

    summary = summarize_results(transformed)
    logger.info("Summary:")
    for key, value in summary.items():
        logger.info(f"  {key}: {value}")

    if args.save_results:
        results_path = args.results_path or "results.csv"
        logger.info(f"Saving results to {results_path}")
        transformed.to_csv(results_path, index=False)

    return transformed, summary


def main(args):
    setup_logging(args.log_level)
    validate_config()

    has_single = any(v is not None for v in (args.expression, args.password, args.text))
    if not has_single and not args.data_path:
        logger.error("Nothing to do: give --expression, --password, --text or --data_path")
        return 2

    exit_code = 0
    if has_single:
        exit_code = run_single(args, StringProcessor())

    if args.data_path:
        run_batch(args)

    return exit_code


def build_parser():
    parser = argparse.ArgumentParser(description="String processing utilities")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Arithmetic expression to evaluate, e.g. '100 * ( 2 + 12 )'"
    )
    parser.add_argument(
        "--password",
        type=str,
        default=None,
        help="Password to check for strength"
    )
    parser.add_argument(
        "--text",
        type=str,
        default=None,
        help="Text to count digits and words in"
    )
    parser.add_argument(
        "--data_path",
        type=str,
        default=None,
        help="Path to a CSV file for batch processing"
    )
    parser.add_argument(
        "--text_column",
        type=str,
        default=None,
        help=f"Column to count digits and words in (e.g. {DATA_CONFIG['text_column']})"
    )
    parser.add_argument(
        "--password_column",
        type=str,
        default=None,
        help=f"Column with passwords to check (e.g. {DATA_CONFIG['password_column']})"
    )
    parser.add_argument(
        "--expression_column",
        type=str,
        default=None,
        help=f"Column with expressions to evaluate (e.g. {DATA_CONFIG['expression_column']})"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the transformed dataset to a file"
    )
    parser.add_argument(
        "--results_path",
        type=str,
        default="results.csv",
        help="Path to save the transformed dataset"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default from LOGGING_CONFIG)"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()
    sys.exit(main(args))
