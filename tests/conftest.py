"""Shared fixtures for the copreader tests."""

from __future__ import annotations

import pytest

SAMPLE_TEXT = """# The Agpeya
## The First Hour
### Opening Prayer
[EN]
In the name of the Father, and the Son, and the Holy Spirit, one God. Amen.
[COP]
Ϧⲉⲛ ⲫⲣⲁⲛ ⲙ̀Ⲫⲓⲱⲧ ⲛⲉⲙ Ⲡ̀ϣⲏⲣⲓ ⲛⲉⲙ Ⲡⲓⲡⲛⲉⲩⲙⲁ Ⲉⲑⲟⲩⲁⲃ ⲟⲩⲛⲟⲩϯ ⲛ̀ⲟⲩⲱⲧ: ⲁⲙⲏⲛ.
[AR]
باسم الآب والابن والروح القدس، إله واحد. آمين.
---
[EN]
Our Father who art in heaven, hallowed be Thy name.

Thy kingdom come, Thy will be done, on earth as it is in heaven.
### Introduction
[TRAN-EN]
Efnof enak
## The Eleventh Hour
### Introduction
[EN]
Evening prayer.
# Divine Liturgy
## St. Basil Liturgy
### Offertory
[en]
Alleluia. This is the day which the Lord has made.
[tran-ar]
Alleluia
"""


@pytest.fixture
def sample_text() -> str:
    """Return a small library covering every heading level."""

    return SAMPLE_TEXT
