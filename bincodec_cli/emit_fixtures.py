# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import sys
from pathlib import Path
from typing import Optional

from structlog import get_logger

from bincodec.fixtures.render import FixtureFormat
from bincodec.utils.pydantic import BaseModel

logger = get_logger()


class EmitFixturesArgs(BaseModel):
    format: Optional[FixtureFormat]
    fixtures_yaml: Optional[str]
    output: Optional[str]


def main(argv: Optional[list[str]] = None) -> int:
    from bincodec.conf import get_global_settings
    from bincodec.fixtures.loader import get_fixtures
    from bincodec.fixtures.render import render_fixtures
    from bincodec_cli.util import create_parser

    settings = get_global_settings()

    parser = create_parser()
    parser.add_argument('--format', choices=[i.value for i in FixtureFormat],
                        help=f'Output format (default: {settings.FIXTURE_FORMAT.value})')
    parser.add_argument('--fixtures-yaml', help='Fixture file to render, the built-in examples are used by default')
    parser.add_argument('--output', help='File where the fixtures will be written, stdout is used by default')
    raw_args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    args = EmitFixturesArgs.model_validate(vars(raw_args))

    fixtures = get_fixtures(args.fixtures_yaml or settings.FIXTURES_YAML)
    output = render_fixtures(fixtures, args.format or settings.FIXTURE_FORMAT, zig_header=settings.ZIG_HEADER)

    if args.output is None:
        sys.stdout.write(output)
    else:
        Path(args.output).write_text(output)
        logger.info('fixtures written', path=args.output)
    return 0
