"""FastAPI application for SoundKey phonetic encoding and name lookup."""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Optional
import logging

from ... import __version__
from ...config import SoundKeyConfig
from ...matching import NameMatcher, PhoneticIndex, IndexEntry

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="SoundKey API",
    description="Phonetic keys, name comparison and phonetic lookup",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Shared matcher and index
config = SoundKeyConfig()
matcher = NameMatcher(config)
index = PhoneticIndex(config)


# Pydantic models for API
class NamePair(BaseModel):
    name1: str
    name2: str


class NameList(BaseModel):
    names: List[str]


class KeysResponse(BaseModel):
    word: str
    primary: str
    secondary: str
    ambiguous: bool


class CompareResponse(BaseModel):
    name1: str
    name2: str
    sounds_alike: bool
    level: Optional[str] = None


def entry_to_dict(entry: IndexEntry) -> dict:
    return {
        'id': entry.entry_id,
        'name': entry.name,
        'primary': entry.keys.primary,
        'secondary': entry.keys.secondary,
    }


@app.get("/api/encode/{word}", response_model=KeysResponse)
async def encode_word(word: str):
    """Phonetic keys of a single word or name."""
    keys = matcher.word_keys(word)
    return KeysResponse(
        word=word,
        primary=keys.primary,
        secondary=keys.secondary,
        ambiguous=keys.is_ambiguous,
    )


@app.post("/api/compare", response_model=CompareResponse)
async def compare_names(request: NamePair):
    """Check whether two names sound alike."""
    level = matcher.match_level(request.name1, request.name2)
    return CompareResponse(
        name1=request.name1,
        name2=request.name2,
        sounds_alike=level is not None,
        level=level,
    )


@app.post("/api/index")
async def add_names(request: NameList):
    """Add names to the shared phonetic index."""
    if not request.names:
        raise HTTPException(status_code=422, detail="No names given")

    try:
        entries = [index.add(name) for name in request.names]
    except Exception as e:
        logger.error(f"Error indexing names: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return {
        'added': len(entries),
        'total': len(index),
        'entries': [entry_to_dict(entry) for entry in entries],
    }


@app.get("/api/index/groups/duplicates")
async def duplicate_groups():
    """Indexed names grouped by shared primary key."""
    return {
        key: [entry_to_dict(entry) for entry in members]
        for key, members in index.groups().items()
    }


@app.get("/api/index/{name}")
async def lookup_name(name: str):
    """Indexed names that sound like ``name``."""
    matches = index.lookup(name)
    if not matches:
        raise HTTPException(status_code=404, detail=f"No names sound like {name}")

    return {
        'name': name,
        'matches': [entry_to_dict(entry) for entry in matches],
    }


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        'status': 'healthy',
        'version': __version__,
        'indexed_names': len(index),
    }
