import os
from dotenv import load_dotenv

load_dotenv()

# Where the corpus lands when the CLI gets no argument
OUTPUT_DIR = os.getenv("SDK_VECTORS_OUTPUT_DIR", "./test-vectors")
LOG_LEVEL = os.getenv("SDK_VECTORS_LOG_LEVEL", "WARNING")

# JSON rendering; consumers diff these files, keep the default unless regenerating everything
INDENT = int(os.getenv("SDK_VECTORS_INDENT", "2"))
