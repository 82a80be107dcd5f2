#!/usr/bin/env python3

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .models import AirspaceDatabase
from .parsers import AirspaceParser, ParseResult
from .utils import LoggingOperation, UnitSetting, to_user_unit

logger = logging.getLogger(__name__)


class AirspaceExporter:
    """Parses airspace files into one database and writes the requested outputs."""

    def __init__(self, args):
        self.args = args
        self.units = UnitSetting.preset(args.units)
        self.database = AirspaceDatabase()
        self.results: List[ParseResult] = []

    def parse_files(self) -> bool:
        parser = AirspaceParser(self.database)
        all_ok = True
        for path in self.args.files:
            operation = LoggingOperation(abort_on_error=self.args.abort_on_error)
            result = parser.parse_file(path, operation, encoding=self.args.encoding)
            self.results.append(result)
            print(f"{path}: {result}")
            if not result:
                all_ok = False
        return all_ok

    def print_summary(self) -> None:
        airspaces = self.database.airspaces
        print(f"Total: {len(airspaces)} airspaces")
        for name, group in sorted(airspaces.group_by_class().items()):
            print(f"  {name:<12} {len(group)}")

        if not self.args.list:
            return

        for airspace in airspaces:
            line = (f"{airspace.name:<30} {airspace.airspace_class.name:<10} "
                    f"{airspace.base.to_text(self.units.altitude_unit)} - "
                    f"{airspace.top.to_text(self.units.altitude_unit)}")
            if airspace.shape == 'circle':
                radius = to_user_unit(airspace.radius, self.units.distance_unit)
                latitude, longitude = airspace.center.to_dms()
                line += f" radius {radius:.1f}{self.units.distance_unit.value} around {latitude} {longitude}"
            else:
                line += f" {len(airspace.points)} points"
            print(line)

    def export(self) -> None:
        if self.args.json:
            self.database.save_to_json(self.args.json)
        if self.args.csv:
            df = self.database.to_dataframe()
            df.to_csv(self.args.csv, index=False)
            logger.info(f"Saved {len(df)} airspaces to {self.args.csv}")

    def run(self) -> int:
        all_ok = self.parse_files()
        self.print_summary()
        self.export()
        return 0 if all_ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Parse OpenAir and TNP airspace files')

    parser.add_argument('files', help='Airspace files to parse', nargs='+', type=Path)

    # Parsing
    parser.add_argument('--encoding', help='Text encoding of the files', default='utf-8')
    parser.add_argument('--abort-on-error', help='Stop parsing a file at its first bad line', action='store_true')

    # Output configuration
    parser.add_argument('--json', help='JSON output file')
    parser.add_argument('--csv', help='CSV output file')
    parser.add_argument('-l', '--list', help='List every airspace', action='store_true')
    parser.add_argument('--units', help='Display units', choices=UnitSetting.preset_names(), default='european')

    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    exporter = AirspaceExporter(args)
    return exporter.run()


if __name__ == '__main__':
    sys.exit(main())
