TOP_K: int = 5

# Web front-end (--gui)
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 4567

# Corpus reading
DATA_SEPARATOR: str = ","
CORPUS_ENCODING: str = "utf-8"

# /* ~~~ REPL / CLI messages ~~~ */
REPL_ERROR: str = "ERROR: Invalid input for REPL"
USAGE: str = (
    "ERROR: usage\n"
    "./run --data=<list of files> \n"
    "[--prefix] [--whitespace] [--led=<led>]\n"
    "[--gui] [--port=<port>]"
)
