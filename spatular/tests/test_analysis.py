import pandas as pd
import pytest

from spatular.core.analysis.analyzer import DefaultCorpusAnalyzer
from spatular.core.analysis.config import CorpusAnalysisConfig


@pytest.fixture
def posts() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "text": [
                "Just landed in Bangkok! Bangkok is great",
                "Great food in Bangkok",
            ],
            "language": ["en-th", "en"],
        }
    )


def test_summary(posts):
    summary = DefaultCorpusAnalyzer().analyze(posts)

    assert summary["document_count"] == 2
    assert summary["token_count"] == 11
    assert summary["top_terms"][0] == {"term": "bangkok", "frequency": 3}
    assert summary["top_ngrams"][0] == {"ngram": "in bangkok", "count": 2}
    assert summary["language_distribution"] == {"en": 100.0, "th": 50.0}
    assert summary["length_distribution"] == [
        {"length": 4, "count": 1},
        {"length": 7, "count": 1},
    ]


def test_top_k_limits(posts):
    cfg = CorpusAnalysisConfig(top_terms=2, ngram_top_k=1, ngram_size=3)
    summary = DefaultCorpusAnalyzer(config=cfg).analyze(posts)
    assert len(summary["top_terms"]) == 2
    assert len(summary["top_ngrams"]) == 1
    assert len(summary["top_ngrams"][0]["ngram"].split(" ")) == 3


def test_numbers_can_be_excluded():
    df = pd.DataFrame({"text": ["room 101 room 101 101"]})
    analyzer = DefaultCorpusAnalyzer(config=CorpusAnalysisConfig(exclude_numbers=True))
    summary = analyzer.analyze(df)
    assert summary["top_terms"] == [{"term": "room", "frequency": 2}]
    assert summary["language_distribution"] == {}


def test_missing_text_column():
    with pytest.raises(KeyError):
        DefaultCorpusAnalyzer().analyze(pd.DataFrame({"body": ["x"]}))
