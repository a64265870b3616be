"""Entry point: generate a quiz from a text file and print it as JSON."""

import argparse
import logging
import sys

from quizlit.config import load_config
from quizlit.errors import QuizGenerationError
from quizlit.models import GenerationRequest
from quizlit.orchestrator import QuizGenerator
from quizlit.source_loader import read_source_text


def main() -> None:
    """Parse arguments, run generation and write the quiz to stdout."""
    parser = argparse.ArgumentParser(description="Generate a quiz from study text.")
    parser.add_argument("source", help="Path to a plain-text source file")
    parser.add_argument("--title", default="")
    parser.add_argument("--description", default="")
    parser.add_argument("--difficulty", default="medium")
    parser.add_argument("--count", type=int, default=0, help="Number of questions")
    parser.add_argument("--config", default="config.yaml")
    args = parser.parse_args()

    config = load_config(args.config)
    logging.basicConfig(
        level=config.logging.level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        request = GenerationRequest(
            title=args.title,
            description=args.description,
            difficulty=args.difficulty,
            source_text=read_source_text(args.source),
            question_count=args.count,
        )
        quiz = QuizGenerator(config).generate_quiz(request)
    except (QuizGenerationError, FileNotFoundError) as e:
        logging.getLogger("quizlit").error("Quiz generation failed: %s", e)
        sys.exit(1)

    print(quiz.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
