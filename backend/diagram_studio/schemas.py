from pydantic import BaseModel
from typing import Optional


class AnalyzeRequest(BaseModel):
    text: str = ""
    language: Optional[str] = None


class CompileRequest(BaseModel):
    """Fields of one compiled diagram prompt"""
    prompt: str = ""
    preset: str = ""  # massing | circulation | zoning | program | immersive | process
    style: str = "minimal"  # minimal | bold
    emphasis: str = "all"  # all | massing | circulation | program | experience
    quality: str = "portfolio"  # draft | portfolio
    intent: Optional[str] = None


class ExplainRequest(CompileRequest):
    """Request a caption prompt for a diagram"""
    language: Optional[str] = None


class GenerateRequest(CompileRequest):
    """Request a full generation plan (one prompt per intent)"""
    multi_intent: bool = False
    count: Optional[int] = None  # intents in multi-intent mode, images otherwise
    variations: Optional[int] = None  # images per intent
    language: Optional[str] = None
