import hashlib
from typing import Dict


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, no other normalization)"""
    lowered = text.lower()
    return lowered == lowered[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count words separated by runs of whitespace; blank input has no words"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character, in order of first occurrence"""
    frequency: Dict[str, int] = {}
    for char in text:
        frequency[char] = frequency.get(char, 0) + 1
    return frequency


def analyze_string(value: str) -> Dict:
    """Analyze a string and return all computed properties"""
    return {
        "length": len(value),
        "is_palindrome": is_palindrome(value),
        "unique_characters": count_unique_characters(value),
        "word_count": count_words(value),
        "sha256_hash": compute_sha256(value),
        "character_frequency_map": get_character_frequency(value),
    }
