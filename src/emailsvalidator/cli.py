import argparse
import logging
import sys
from typing import List

from emailsvalidator.common.config import CleanUpOptions
from emailsvalidator.common.errors import ConfigurationError
from emailsvalidator.common.utils import prepare_input_files, print_list_with_title
from emailsvalidator.processing.email_list_processor import EmailListProcessor
from emailsvalidator.reporting.email_list_report import EmailListReport

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger(__name__)


def validate_xlsx_file(file_path: str) -> str:
    if not file_path.lower().endswith('.xlsx'):
        raise argparse.ArgumentTypeError("File must have a .xlsx extension.")
    return file_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="emailsvalidator",
                                     description="""Extract the valid email addresses contained in free-form text.""",
                                     formatter_class=lambda prog: argparse.HelpFormatter(prog, max_help_position=80))

    parser.add_argument('-i', '--input', metavar='<file>', dest="input_files",
                        nargs='+', type=str, default=[],
                        help='Files to read, wildcards allowed. Reads stdin when omitted.')

    parser.add_argument('-o', '--output', metavar='<xlsx>', dest="output_file", type=validate_xlsx_file,
                        help='Also write the results to an Excel report.')

    parser.add_argument('--per-line', action='store_true', dest="per_line",
                        help='Treat every input line as a separate list.')

    parser.add_argument('--only-emails', action='store_true', dest="only_emails",
                        help='Remove display names: toto Shinnigan <user@gmail.com> --> user@gmail.com')

    parser.add_argument('--only-names', action='store_true', dest="only_names",
                        help='Remove addresses, generating names when missing: toto.shinnigan@gmail.com --> Toto Shinnigan')

    parser.add_argument('--add-names', action='store_true', dest="add_names",
                        help='Generate display names for addresses without one.')

    parser.add_argument('--log-garbage', action='store_true', dest="log_garbage",
                        help='Log every field not containing a valid email.')

    parser.add_argument('-v', '--verbose', action='store_true', dest="verbose",
                        help='Verbose logging.')

    return parser


def read_texts(args) -> List[str]:
    if args.input_files:
        texts = []
        for file_name in prepare_input_files(args.input_files):
            logger.info("Processing: %s", file_name)
            with open(file_name, encoding="utf-8", errors="replace") as f:
                texts.append(f.read())
    else:
        texts = [sys.stdin.read()]

    if args.per_line:
        return [line for text in texts for line in text.splitlines()]
    return texts


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if (args.log_garbage or args.verbose) else logging.WARNING,
                        format=_LOG_FORMAT)

    try:
        options = CleanUpOptions.from_args(args)
    except ConfigurationError as e:
        parser.error(str(e))

    processor = EmailListProcessor(options)
    report = EmailListReport(args.output_file) if args.output_file else None

    for text in read_texts(args):
        for entry in processor.process(text):
            print(entry)
        if report:
            report.add_records(processor.records)

    processor.get_pipeline_manager().get_filter_manager().display_summary()
    print_list_with_title("Rejected:", [f"{r.reason}: {r.text}" for r in processor.rejected], file=sys.stderr)

    if report:
        report.add_rejections(processor.rejected)
        report.generate()
        report.close()
        print("Please see report: {}".format(report.output_file), file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
