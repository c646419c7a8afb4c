from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from analysis.frequency import aggregate, longest_word_length
from analysis.histogram import render_distribution
from analysis.models import Distribution, OccurrenceEntry, Ranking
from analysis.tokenizer import tokenize, word_length
from common.config import AnalysisConfig, AppConfig
from common.logger import get_logger
from ingestion.loaders import load_document

log = get_logger(__name__)


def pad(word: str, width: int) -> str:
    """
    Right-align word within width using leading spaces; never truncates.
    Width is counted in graphemes, so combining marks take no extra room.
    """
    return " " * (width - word_length(word)) + word


@dataclass(frozen=True)
class WordCountReport:
    ranking: Ranking
    top_words: List[OccurrenceEntry]
    distributions: List[Distribution]
    config: AnalysisConfig = field(default_factory=AnalysisConfig)

    @property
    def unique_count(self) -> int:
        return len(self.ranking)

    @property
    def histogram_words(self) -> List[OccurrenceEntry]:
        return self.ranking[: self.config.histogram_words_count]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "unique_words": self.unique_count,
            "minimum_word_length": self.config.minimum_word_length,
            "ranking": [{"word": e.word, "count": e.count} for e in self.ranking],
            "top_words": [{"word": e.word, "count": e.count} for e in self.top_words],
            "distributions": [
                {"word": d.word, "bar": d.bar, "length": len(d.bar)}
                for d in self.distributions
            ],
        }


def build_report(text: str, config: AnalysisConfig | None = None) -> WordCountReport:
    """
    Run the analysis pipeline over document text:
    - tokenize (normalize + split + drop short words)
    - aggregate into a ranking
    - take the top-N table prefix
    - render the histogram prefix, unless it is empty
    """
    config = config or AnalysisConfig()
    words = tokenize(text, config.minimum_word_length)
    ranking = aggregate(words)
    log.info("Tokenized %d words, %d distinct", len(words), len(ranking))

    top_words = ranking[: config.top_words_count]
    histogram_words = ranking[: config.histogram_words_count]
    if histogram_words:
        distributions = render_distribution(
            histogram_words, marker=config.histogram_marker_character
        )
    else:
        log.warning("No words to plot, skipping histogram")
        distributions = []

    return WordCountReport(
        ranking=ranking,
        top_words=top_words,
        distributions=distributions,
        config=config,
    )


def format_count(report: WordCountReport) -> List[str]:
    return [
        f"There are {report.unique_count} unique words having at least "
        f"{report.config.minimum_word_length} letters."
    ]


def format_top_words(report: WordCountReport) -> List[str]:
    n = report.config.top_words_count
    width = longest_word_length(report.top_words)
    lines = [f"The top {n} words are as follows: <word> <occurrences>:"]
    lines += [f"{pad(e.word, width)} {e.count}" for e in report.top_words]
    return lines


def format_histogram(report: WordCountReport) -> List[str]:
    n = report.config.histogram_words_count
    width = longest_word_length(report.histogram_words)
    lines = [f"The top {n} words' distributions are as follows: <word> <frequency>:"]
    lines += [f"{pad(d.word, width)} {d.bar}" for d in report.distributions]
    return lines


def format_report(report: WordCountReport) -> List[str]:
    return format_count(report) + format_top_words(report) + format_histogram(report)


def perform(
    source: str,
    config: AnalysisConfig | None = None,
    app: AppConfig | None = None,
) -> WordCountReport:
    """Fetch a document, analyse it and print the three reports to stdout."""
    doc = load_document(source, app)
    report = build_report(doc.text, config)
    for line in format_report(report):
        print(line)
    return report
