import os

from bincodec.conf import UNITTESTS_SETTINGS_FILEPATH
from bincodec_cli.util import LoggingOptions, LoggingOutput, setup_logging

os.environ['BINCODEC_CONFIG_YAML'] = os.environ.get('BINCODEC_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

# logs go to stderr, stdout is asserted on by the cli tests
setup_logging(logging_output=LoggingOutput.PRETTY, logging_options=LoggingOptions(debug=True))
