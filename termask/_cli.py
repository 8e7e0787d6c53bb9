import sys
import argparse

from .answers import AnswerStore
from .errors import AnswerStoreError
from .output import Output, QUIET, NORMAL, VERBOSE, DEBUG
from .prompt import PromptEngine
from .utils import enable_udp_logging, listen_to_logs


def make_parser():
    parser = argparse.ArgumentParser(
        prog="termask",
        description="Ask a question in the terminal and print the answer on stdout.",
    )
    parser.add_argument("--version", action="store_true", help="show the version and exit")
    parser.add_argument("--listen", action="store_true", help="print logs sent by other termask processes")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("question", help="the question to ask")
    common.add_argument("--id", dest="qid", default=None, help="question id, to look up the answer")
    common.add_argument("--answers", metavar="FILE", help="JSON file with pre-recorded answers")
    common.add_argument("--record", metavar="FILE", help="save the answers (including new ones) to this file")
    common.add_argument("--prompt", default=None, help="the prompt indicator")
    common.add_argument("--log", action="store_true", help="send logs to a `termask --listen` process")
    verbosity = common.add_mutually_exclusive_group()
    verbosity.add_argument("-q", "--quiet", dest="verbosity", action="store_const", const=QUIET)
    verbosity.add_argument("-v", "--verbose", dest="verbosity", action="store_const", const=VERBOSE)
    verbosity.add_argument("--debug", dest="verbosity", action="store_const", const=DEBUG)

    commands = parser.add_subparsers(dest="command")
    commands.add_parser("ask", parents=[common], help="ask for a line of text")
    hidden = commands.add_parser("hidden", parents=[common], help="ask for a secret")
    hidden.add_argument("--no-markers", dest="markers", action="store_false", help="don't show a marker per typed character")
    select = commands.add_parser("select", parents=[common], help="choose one of the given options")
    select.add_argument("options", nargs="+", help="the options to choose from")
    return parser


def cli(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if "--listen" in argv:
        listen_to_logs()
        return 0

    parser = make_parser()
    args = parser.parse_args(argv)
    if args.version:
        from . import __version__

        print("termask", __version__)
        return 0
    elif not args.command:
        parser.print_usage(sys.stderr)
        return 2

    if args.log:
        enable_udp_logging()

    # Prompts go to stderr, so that stdout only has the answer
    output = Output(sys.stderr, args.verbosity or NORMAL)
    store = AnswerStore(recording=bool(args.record))
    engine = PromptEngine(output, store)
    if args.prompt is not None:
        engine.set_prompt(args.prompt, engine.config.color)

    try:
        if args.answers:
            store.load_from_file(args.answers)
        if args.command == "ask":
            answer = engine.ask(args.question, args.qid)
        elif args.command == "hidden":
            answer = engine.hidden(args.question, args.markers, args.qid)
        else:
            result = engine.select(args.question, args.options, args.qid)
            answer = None if result is None else result[1]
        if args.record:
            store.save_to_file(args.record)
    except AnswerStoreError as err:
        return fail(output, str(err))
    except EOFError:
        return fail(output, "No answer: input was closed.")
    except KeyboardInterrupt:
        output.line_feed(level=QUIET)
        return 130

    if answer is None:
        return 1
    print(answer)
    return 0


def fail(output, message):
    with output.verbosity_override(QUIET):
        output.error(message)
    return 1
