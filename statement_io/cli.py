import argparse
import json
import logging
import os
import sys

import config
from processors.remark_processor import RemarkProcessor
from utils.bank_rules import DEFAULT_IDENTIFIER, find_bank

from . import process_statement
from .errors import StatementFileError


def default_output_path(path: str) -> str:
    stem, ext = os.path.splitext(path)
    return f"{stem}_processed{ext}"


def _print_remark(remark: str, parsed, as_json: bool):
    if as_json:
        print(json.dumps({'remark': remark, **parsed.model_dump(by_alias=True)}, ensure_ascii=False))
    else:
        print('\t'.join([remark, parsed.name, parsed.transaction_id, parsed.bank]))


def main(argv=None):
    parser = argparse.ArgumentParser(description='Extract payer name, transaction ID and bank from transaction remarks')
    parser.add_argument('--file', default='', help='CSV or XLSX statement with a "%s" column' % config.REMARKS_COLUMN)
    parser.add_argument('--output', default='', help='Where to write the processed file (default: <name>_processed.<ext>)')
    parser.add_argument('--remark', action='append', default=[], help='Parse a single remark; may be repeated')
    parser.add_argument('--bank-of', action='append', default=[], help='Identify the bank named in a snippet (IFSC code, UPI handle, ...); may be repeated')
    parser.add_argument('--list-banks', action='store_true', help='Print the known banks in match order')
    parser.add_argument('--json', action='store_true', help='Print parsed remarks as JSON lines')
    parser.add_argument('--log-level', default=config.LOG_LEVEL, help='Logging level (default: %(default)s)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format=config.LOG_FORMAT)

    if args.list_banks:
        for name in DEFAULT_IDENTIFIER.banks:
            print(name)

    for snippet in args.bank_of:
        print('\t'.join([snippet, find_bank(snippet)]))

    if not args.file and not args.remark:
        if args.list_banks or args.bank_of:
            return 0
        parser.print_usage()
        print('Nothing to do: provide --file, --remark, --bank-of or --list-banks.')
        return 1

    processor = RemarkProcessor()
    for remark in args.remark:
        _print_remark(remark, processor.compose(remark), args.json)

    if args.file:
        if not os.path.isfile(args.file):
            print('Error: file not found:', args.file)
            return 1
        with open(args.file, 'rb') as f:
            data = f.read()
        try:
            output, _ = process_statement(data, args.file, processor)
        except StatementFileError as e:
            print('Error:', e)
            return 1
        out_path = args.output or default_output_path(args.file)
        with open(out_path, 'wb') as f:
            f.write(output)
        print('Processed file written to:', out_path)

    return 0


if __name__ == '__main__':
    sys.exit(main())
