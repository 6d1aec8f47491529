#!/usr/bin/env python3
"""
nlfacts - Natural-Language Fact Base
"""

import logging
import sys
from pathlib import Path
from typing import Optional, List

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

# Setup logger
logger = logging.getLogger(__name__)

from nlfacts.kb.fact_store import FactStore
from nlfacts.kb.models import WILDCARD
from nlfacts.parser.sentence_translator import SentenceTranslator
from nlfacts.parser.models import TranslationResult
from nlfacts.router.question_answerer import QuestionAnswerer
from nlfacts.router.models import Answer


DEFAULT_CONFIG = {
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "file": "logs/nlfacts.log"
    },
    "store": {
        "wildcard": WILDCARD
    },
    "debug": {
        "enabled": False
    }
}


def load_config(config_path: str = "config/config.yaml") -> dict:
    """
    Load configuration from YAML file.

    Sections missing from the file (or keys missing from a section) are
    filled in from DEFAULT_CONFIG.
    """
    try:
        with open(config_path, 'r') as f:
            loaded = yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"❌ Configuration file not found: {config_path}")
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"❌ Error parsing configuration file: {e}")
        sys.exit(1)

    if not isinstance(loaded, dict):
        print(f"❌ Configuration file must contain a mapping: {config_path}")
        sys.exit(1)

    config = dict(loaded)
    for section, defaults in DEFAULT_CONFIG.items():
        config[section] = {**defaults, **(loaded.get(section) or {})}
    return config


def setup_logging(config: dict, debug: bool = False):
    """
    Setup logging configuration.

    Debug mode forces DEBUG level so rule selection and raw query patterns
    are logged. A null ``logging.file`` disables the log file.
    """
    log_config = config.get("logging", {})
    log_level = logging.DEBUG if debug else getattr(logging, str(log_config.get("level", "WARNING")).upper())
    log_format = log_config.get("format", DEFAULT_CONFIG["logging"]["format"])

    handlers = [logging.StreamHandler()]

    log_file = log_config.get("file")
    if log_file:
        # Create logs directory if it doesn't exist
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=log_level, format=log_format, handlers=handlers)


class FactQASystem:
    """Main fact base system: sentences in, answers out."""

    def __init__(self, config: dict):
        self.config = config
        self.console = Console()

        wildcard = config.get("store", {}).get("wildcard", WILDCARD)

        # One store shared by the translator (writer) and answerer (reader)
        self.store = FactStore(wildcard=wildcard)
        self.translator = SentenceTranslator(self.store)
        self.answerer = QuestionAnswerer(self.store, wildcard=wildcard)

        self.debug_mode = config.get("debug", {}).get("enabled", False)
        logger.info(f"Fact base ready (wildcard: {wildcard!r}, debug: {self.debug_mode})")

    def tell(self, sentence: str) -> TranslationResult:
        """Translate a sentence into a fact and print the confirmation."""
        result = self.translator.translate(sentence)

        style = "green" if result.added else "yellow"
        self.console.print(f"[{style}]{escape(result.message)}[/{style}]")
        return result

    def tell_all(self, sentences: List[str]) -> List[TranslationResult]:
        return [self.tell(sentence) for sentence in sentences]

    def ask(self, question: str, debug: Optional[bool] = None) -> Answer:
        """Answer a question and print the result."""
        answer = self.answerer.answer(question)
        self.display_answer(answer, debug=self.debug_mode if debug is None else debug)
        return answer

    def display_answer(self, answer: Answer, debug: bool = False):
        """Display an answer, with the routed query when debugging."""
        if debug:
            routing_table = Table(title="Query Routing Information")
            routing_table.add_column("Property", style="cyan")
            routing_table.add_column("Value", style="white")

            routing_table.add_row("Question Type", answer.question_type.value)
            routing_table.add_row("Predicate", escape(answer.predicate or "-"))
            routing_table.add_row("Pattern", escape(", ".join(answer.pattern) or "-"))
            routing_table.add_row("Matches", str(answer.metadata.get("match_count", 0)))

            self.console.print(routing_table)

        self.console.print(escape(answer.render()))

    def query(self, predicate: str, pattern: List[str]) -> List[List[str]]:
        """Run a direct fact base query and print each matching fact."""
        results = self.store.query(predicate, pattern)

        if not results:
            self.console.print("Answer: No matches found.")
        for arguments in results:
            self.console.print(escape(f"{predicate.lower()}({', '.join(arguments)})"))
        return results

    def show_facts(self):
        """Display all facts currently stored in the fact base."""
        self.console.print("\n========== FACT BASE ==========")

        if not len(self.store):
            self.console.print("Database is empty.")
            return

        for predicate in sorted(self.store.get_predicates()):
            self.console.print(f"\nPredicate: {escape(predicate)}")
            for arguments in self.store.facts[predicate]:
                self.console.print(escape(f"  {predicate}({', '.join(arguments)})"))

        self.console.print("===============================\n")

    def show_stats(self):
        """Display fact base statistics."""
        stats = self.store.get_stats()

        stats_table = Table(title="Fact Base Statistics")
        stats_table.add_column("Metric", style="cyan")
        stats_table.add_column("Value", style="white")

        stats_table.add_row("Total Facts", str(stats["total_facts"]))
        stats_table.add_row("Predicates", str(len(stats["predicates"])))
        for predicate, arities in stats["arities"].items():
            stats_table.add_row(
                f"  {escape(predicate)}",
                "arity " + ", ".join(str(arity) for arity in arities)
            )

        self.console.print(stats_table)

    def interactive_mode(self):
        """Run the system in interactive mode."""
        self.console.print(Panel(
            "[bold blue]Natural-Language Fact Base[/bold blue]\n"
            "Type a sentence to add a fact, or a question ending in '?' to query.\n"
            "Type 'quit' to exit, 'facts' to list facts, 'stats' for statistics, 'help' for commands.",
            border_style="blue"
        ))

        while True:
            try:
                line = click.prompt("\nnlfacts", prompt_suffix="> ", default="", show_default=False)
                command = line.strip().lower()

                if command in ['quit', 'exit', 'q']:
                    break
                elif command == 'facts':
                    self.show_facts()
                    continue
                elif command == 'stats':
                    self.show_stats()
                    continue
                elif command == 'help':
                    self.console.print("""
                    [bold]Available Commands:[/bold]
                    • A sentence such as 'John is the parent of Mary' adds a fact
                    • A question such as 'Who is the parent of Mary?' queries the facts
                    • 'facts' - List all facts
                    • 'stats' - Show fact base statistics
                    • 'help' - Show this help message
                    • 'quit' - Exit
                    """)
                    continue
                elif not command:
                    continue

                if line.strip().endswith("?"):
                    self.ask(line.strip())
                else:
                    self.tell(line.strip())

            except (KeyboardInterrupt, click.Abort):
                self.console.print("\n[yellow]Exiting...[/yellow]")
                break


sentence_option = click.option(
    '--sentence', '-s', 'sentences', multiple=True,
    help='Sentence to add to the fact base first (repeatable)'
)


@click.group()
@click.option('--config', '-c', default='config/config.yaml', help='Configuration file path')
@click.option('--debug', '-d', is_flag=True, help='Enable debug mode')
@click.pass_context
def cli(ctx, config, debug):
    """Natural-Language Fact Base CLI."""
    ctx.ensure_object(dict)
    ctx.obj['config'] = load_config(config)
    ctx.obj['debug'] = debug

    # Setup logging
    setup_logging(ctx.obj['config'], debug=debug)

    # Enable debug mode in config
    if debug:
        ctx.obj['config']['debug']['enabled'] = True


@cli.command()
@click.argument('question')
@sentence_option
@click.pass_context
def ask(ctx, question, sentences):
    """Answer a question about the given sentences."""
    system = FactQASystem(ctx.obj['config'])
    system.tell_all(list(sentences))
    system.ask(question)


@cli.command()
@click.argument('predicate')
@click.argument('pattern', nargs=-1)
@sentence_option
@click.pass_context
def query(ctx, predicate, pattern, sentences):
    """Query PREDICATE directly; use the wildcard marker for unknown arguments."""
    system = FactQASystem(ctx.obj['config'])
    system.tell_all(list(sentences))
    system.query(predicate, list(pattern))


@cli.command()
@sentence_option
@click.pass_context
def facts(ctx, sentences):
    """List the facts produced from the given sentences."""
    system = FactQASystem(ctx.obj['config'])
    system.tell_all(list(sentences))
    system.show_facts()


@cli.command()
@click.pass_context
def interactive(ctx):
    """Run in interactive mode."""
    system = FactQASystem(ctx.obj['config'])
    system.interactive_mode()


if __name__ == "__main__":
    cli()
