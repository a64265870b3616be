"""Lexical heuristics feeding the rule-based question generator."""

import logging
import re
from collections import Counter

logger = logging.getLogger(__name__)

SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
CONCEPT_BOUNDARY = re.compile(r"[.!?]")

TOKEN_PUNCTUATION = ".,!?;:()[]{}\"'"
WORD_PUNCTUATION = ".,!?;:"

# English and Indonesian function words
STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
        "be", "have", "has", "had", "do", "does", "did", "will", "would",
        "could", "should", "may", "might", "must", "can", "this", "that",
        "these", "those", "they", "their", "there", "which", "when", "where",
        "what", "also", "into", "than", "then", "such", "some", "each",
        "yang", "dan", "atau", "adalah", "ini", "itu", "dari", "ke", "di",
        "untuk", "dengan", "pada", "dalam", "juga", "akan", "oleh", "sebagai",
        "merupakan", "tersebut", "dapat", "karena",
    }
)

MIN_SENTENCE_WORDS = 5
MAX_SENTENCE_WORDS = 30
MIN_SENTENCE_CHARS = 30
MAX_SENTENCE_CHARS = 200
MAX_KEYWORDS = 30
MAX_CONCEPTS = 20
MIN_INFORMATIVE = 5


def extract_sentences(content: str) -> list[str]:
    """Split content into reasonably sized, mostly-alphabetic sentences.

    Keeps sentences of 5-30 words and 30-200 characters in which letters
    make up at least half the characters. Each kept sentence ends with
    terminal punctuation.
    """
    sentences = []
    for part in SENTENCE_BOUNDARY.split(content):
        sentence = " ".join(part.split())
        words = sentence.split()
        if not (MIN_SENTENCE_WORDS <= len(words) <= MAX_SENTENCE_WORDS):
            continue
        if not (MIN_SENTENCE_CHARS <= len(sentence) <= MAX_SENTENCE_CHARS):
            continue
        if not sentence.endswith((".", "!", "?")):
            sentence += "."
        letters = sum(1 for ch in sentence if ch.isalpha())
        if letters * 2 >= len(sentence):
            sentences.append(sentence)
    return sentences


def extract_keywords(content: str) -> list[str]:
    """Rank lower-cased content words by frequency.

    Stop words and tokens of 3 characters or fewer are ignored. Ties keep
    first-seen order. At most 30 keywords are returned.
    """
    counts: Counter[str] = Counter()
    for token in content.split():
        cleaned = token.lower().strip(TOKEN_PUNCTUATION)
        if len(cleaned) > 3 and cleaned not in STOP_WORDS:
            counts[cleaned] += 1
    ranked = sorted(counts, key=lambda word: counts[word], reverse=True)
    return ranked[:MAX_KEYWORDS]


def extract_concepts(content: str) -> list[str]:
    """Collect two-word phrases that look like domain concepts.

    Both words must be longer than 3 characters and the phrase longer
    than 8. Phrases are deduplicated case-insensitively, capped at 20.
    """
    concepts: list[str] = []
    seen: set[str] = set()
    for sentence in CONCEPT_BOUNDARY.split(content):
        words = [w.strip(WORD_PUNCTUATION) for w in sentence.split()]
        for first, second in zip(words, words[1:]):
            if len(first) <= 3 or len(second) <= 3:
                continue
            phrase = f"{first} {second}"
            key = phrase.lower()
            if len(phrase) > 8 and key not in seen:
                seen.add(key)
                concepts.append(phrase)
                if len(concepts) >= MAX_CONCEPTS:
                    return concepts
    return concepts


def filter_informative_sentences(sentences: list[str], keywords: list[str]) -> list[str]:
    """Keep sentences mentioning at least two keywords and over 40 chars.

    When fewer than five survive, all sentences are returned instead so
    generation still has material to work with.
    """
    filtered = []
    for sentence in sentences:
        lowered = sentence.lower()
        hits = sum(1 for keyword in keywords if keyword.lower() in lowered)
        if hits >= 2 and len(sentence) > 40:
            filtered.append(sentence)

    if len(filtered) < MIN_INFORMATIVE and sentences:
        return list(sentences)
    return filtered
