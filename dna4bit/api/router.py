# dna4bit/api/router.py
from __future__ import annotations

from fastapi import APIRouter

from dna4bit.api.routes import sequence

router = APIRouter()
router.include_router(sequence.router)
