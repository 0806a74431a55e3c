import argparse
import logging
import sys

from xlstyles import Document, _get_version
from xlstyles import __name__ as xlstyles_name
from xlstyles.exceptions import FileError, FileFormatError, InvalidAddress

logger = logging.getLogger(xlstyles_name)

TABLE_OPTIONS = {
    "fonts": "fonts",
    "fills": "fills",
    "borders": "borders",
    "formats": "cell_formats",
    "styles": "cell_styles",
}


def command_line_parser():
    parser = argparse.ArgumentParser(
        description="Dump the style tables and cell formats of xlstyles documents"
    )
    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "-S",
        "--list-sheets",
        action="store_true",
        help="List the names of sheets and exit",
    )
    commands.add_argument(
        "-c",
        "--cell",
        action="append",
        help="Cell reference(s) to resolve, for example B3",
    )
    parser.add_argument("-V", "--version", action="store_true")
    parser.add_argument("--fonts", action="store_true", help="Dump the font table")
    parser.add_argument("--fills", action="store_true", help="Dump the fill table")
    parser.add_argument("--borders", action="store_true", help="Dump the border table")
    parser.add_argument("--formats", action="store_true", help="Dump the cell format table")
    parser.add_argument("--styles", action="store_true", help="Dump the named cell styles")
    parser.add_argument(
        "-s", "--sheet", action="append", help="Names of sheet(s) to include in export"
    )
    parser.add_argument("document", nargs="*", help="Document(s) to export")
    parser.add_argument(
        "--debug", default=False, action="store_true", help="Enable debug logging"
    )
    return parser


def print_sheet_names(doc, filename):
    for sheet in doc.sheets:
        print(f"{filename}: {sheet.name}")


def print_style_tables(args, doc, filename):
    for option, table_name in TABLE_OPTIONS.items():
        if not getattr(args, option):
            continue
        for index, record in enumerate(getattr(doc.styles, table_name)):
            print(f"{filename}: {table_name}[{index}]: {record!r}")


def selected_sheets(args, doc):
    for sheet in doc.sheets:
        if args.sheet is not None and sheet.name not in args.sheet:
            continue
        yield sheet


def print_cell_formats(args, doc, filename):
    for sheet in selected_sheets(args, doc):
        for ref in args.cell:
            resolver = sheet.resolver
            format_index = resolver.resolve(ref)
            cell_format = resolver.resolve_format(ref)
            print(
                f"{filename}: {sheet.name}: {ref}: format={format_index} "
                + f"font={cell_format.font_index} fill={cell_format.fill_index} "
                + f"border={cell_format.border_index}"
            )


def print_cells(args, doc, filename):
    for sheet in selected_sheets(args, doc):
        for cell in sheet.cells():
            value = "" if cell.value is None else str(cell.value)
            print(f"{filename}: {sheet.name}: {cell.address}: format={cell.cell_format}: {value}")


def main():
    parser = command_line_parser()
    args = parser.parse_args()

    if args.version:
        print(_get_version())
    elif len(args.document) == 0:
        parser.print_help()
    else:
        hdlr = logging.StreamHandler()
        hdlr.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
        logger.addHandler(hdlr)
        if args.debug:
            logger.setLevel("DEBUG")
        else:
            logger.setLevel("ERROR")
        dump_tables = any(getattr(args, option) for option in TABLE_OPTIONS)
        for filename in args.document:
            try:
                doc = Document(filename)
                if args.list_sheets:
                    print_sheet_names(doc, filename)
                    continue
                if dump_tables:
                    print_style_tables(args, doc, filename)
                if args.cell is not None:
                    print_cell_formats(args, doc, filename)
                elif not dump_tables:
                    print_cells(args, doc, filename)
            except (FileError, FileFormatError, InvalidAddress) as e:
                print(f"{filename}:", str(e), file=sys.stderr)
                sys.exit(1)


if __name__ == "__main__":
    # execute only if run as a script
    main()  # pragma: no cover
