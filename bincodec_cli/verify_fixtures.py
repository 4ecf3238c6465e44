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

import json
import sys
from typing import Optional

from pydantic import PositiveInt
from structlog import get_logger

from bincodec.utils.pydantic import BaseModel

logger = get_logger()


class VerifyFixturesArgs(BaseModel):
    input: str
    fixtures_yaml: Optional[str]
    max_bytes: Optional[PositiveInt]


def main(argv: Optional[list[str]] = None) -> int:
    from bincodec.conf import get_global_settings
    from bincodec.fixtures.loader import get_fixtures
    from bincodec.fixtures.verify import verify_encoded
    from bincodec_cli.util import check_or_exit, create_parser

    settings = get_global_settings()

    parser = create_parser()
    parser.add_argument('input', help='JSON file mapping fixture names to their hex encoded bytes')
    parser.add_argument('--fixtures-yaml', help='Reference fixture file, the built-in examples are used by default')
    parser.add_argument('--max-bytes', type=int, help='Maximum number of bytes a single fixture may take to decode')
    raw_args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    args = VerifyFixturesArgs.model_validate(vars(raw_args))

    with open(args.input, 'r') as f:
        encoded = json.load(f)
    check_or_exit(
        isinstance(encoded, dict) and all(isinstance(i, str) for i in encoded.values()),
        f'{args.input} must contain a JSON object mapping fixture names to hex strings',
    )

    fixtures = get_fixtures(args.fixtures_yaml or settings.FIXTURES_YAML)
    mismatches = verify_encoded(fixtures, encoded, max_bytes=args.max_bytes or settings.MAX_DECODE_BYTES)

    if mismatches:
        logger.error('fixtures do not match', mismatches=len(mismatches), total=len(encoded))
        return 1
    logger.info('all fixtures match', total=len(encoded))
    return 0
