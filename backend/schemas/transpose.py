from typing import List, Optional

from pydantic import BaseModel


class ChartTransposeRequest(BaseModel):
    chart: str = ""
    semitones: int = 0


class ChartTransposeResponse(BaseModel):
    chart: str
    semitones: int
    line_count: int


class ChordListTransposeRequest(BaseModel):
    chords: List[str]
    semitones: int = 0


class ChordListTransposeResponse(BaseModel):
    semitones: int
    original_chords: List[str]
    transposed_chords: List[str]


class SongChartResponse(BaseModel):
    song_id: str
    title: str
    original_key: Optional[str] = None
    current_key: Optional[str] = None
    semitones: int
    chart: str
