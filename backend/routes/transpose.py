from fastapi import APIRouter

from schemas.transpose import (
    ChartTransposeRequest,
    ChartTransposeResponse,
    ChordListTransposeRequest,
    ChordListTransposeResponse,
)
from services.theory import transpose_chart, transpose_chord

router = APIRouter()


@router.post("/transpose")
def transpose_text(req: ChartTransposeRequest) -> dict:
    chart = transpose_chart(req.chart, req.semitones)
    return ChartTransposeResponse(
        chart=chart,
        semitones=req.semitones,
        line_count=len(chart.split("\n")) if chart else 0,
    ).model_dump()


@router.post("/transpose/chords")
def transpose_chord_list(req: ChordListTransposeRequest) -> dict:
    return ChordListTransposeResponse(
        semitones=req.semitones,
        original_chords=req.chords,
        transposed_chords=[transpose_chord(c, req.semitones) for c in req.chords],
    ).model_dump()
