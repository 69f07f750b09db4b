"""
Print the table directory and name strings of a TrueType/OpenType font
(c) 2024 sfntread contributors, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse
import logging

import sfntread
from sfntread.sfnt import NAME_IDS, NameStringError


def main(argv=None):
    parser = argparse.ArgumentParser(prog='sfntread', description=__doc__.splitlines()[1])
    parser.add_argument('infile', help='font file to read')
    parser.add_argument(
        '--tables', action='store_true', default=False,
        help='show the table directory'
    )
    parser.add_argument(
        '--names', action='store_true', default=False,
        help='show the strings in the naming table'
    )
    parser.add_argument(
        '--checksums', action='store_true', default=False,
        help='verify the table checksums'
    )
    parser.add_argument(
        '--debug', action='store_true', default=False,
        help='enable debugging output'
    )
    parser.add_argument(
        '--version', action='version', version=f'sfntread {sfntread.__version__}'
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(levelname)s: %(message)s'
    )
    # default to showing everything
    if not (args.tables or args.names or args.checksums):
        args.tables = args.names = True

    try:
        font = sfntread.load(args.infile)
    except (OSError, sfntread.DecodeError) as e:
        logging.error('Could not read `%s`: %s', args.infile, e)
        return 1

    with font:
        if args.tables:
            _print_tables(font)
        if args.checksums:
            _print_checksums(font)
        if args.names:
            _print_names(font)
    return 0


def _print_tables(font):
    directory = font.directory
    version = directory.sfnt_version
    print(f'sfnt version: {getattr(version, "name", f"0x{version:08x}")}')
    print(f'tables:       {directory.num_tables}')
    for record in directory:
        print(
            f'  {record.table_tag}  checksum=0x{record.checksum:08x} '
            f'offset={record.offset} length={record.length}'
        )
    print()


def _print_checksums(font):
    for tag, ok in font.check_checksums().items():
        print(f'  {tag}  {"ok" if ok else "BAD"}')
    print()


def _print_names(font):
    if 'name' not in font:
        print('no naming table')
        return
    try:
        table = font.get_table('name')
    except sfntread.DecodeError as e:
        logging.error('Could not decode naming table: %r', e)
        return
    for record in table.name_records:
        label = NAME_IDS.get(record.name_id, str(record.name_id))
        key = f'[{record.platform_id}/{record.encoding_id}/0x{record.language_id:04x}]'
        try:
            text = record.get_text(font.stream, table)
        except NameStringError as e:
            text = f'<{e}>'
        print(f'  {key} {label}: {text}')


if __name__ == '__main__':
    sys.exit(main())
