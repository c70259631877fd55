"""Data models for frab sources and HackerTracker output."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class FrabLink:
    """Link attached to a frab event or speaker."""
    url: str
    title: str = ''


@dataclass
class FrabPerson:
    """Speaker reference inside a frab event."""
    id: int
    public_name: str = ''


@dataclass
class FrabEvent:
    """Single event as published in schedule.json."""
    id: int
    title: str
    abstract: str
    type: str
    date: str
    duration: str
    room: str
    links: List[FrabLink] = field(default_factory=list)
    persons: List[FrabPerson] = field(default_factory=list)


@dataclass
class FrabDay:
    """One conference day; rooms keep their document order."""
    rooms: Dict[str, List[FrabEvent]]
    index: Optional[int] = None
    date: Optional[str] = None


@dataclass
class FrabConference:
    """Conference metadata and its days."""
    acronym: str
    title: str
    days: List[FrabDay] = field(default_factory=list)


@dataclass
class FrabSchedule:
    """Parsed schedule.json document."""
    conference: FrabConference


@dataclass
class FrabSpeaker:
    """Single speaker as published in speakers.json."""
    id: int
    public_name: str
    abstract: str
    links: List[FrabLink] = field(default_factory=list)


@dataclass
class HackerTrackerEventType:
    """Output record for event_types.json."""
    id: int
    conference: str
    name: str
    updated_at: str


@dataclass
class HackerTrackerLocation:
    """Output record for locations.json."""
    id: int
    conference: str
    name: str
    updated_at: str


@dataclass
class HackerTrackerSpeaker:
    """Output record for speakers.json."""
    id: int
    conference: str
    name: str
    description: str
    link: str
    updated_at: str


@dataclass
class HackerTrackerEvent:
    """Output record for events.json."""
    id: int
    conference: str
    title: str
    description: str
    link: str
    begin: str
    end: str
    location: int
    event_type: int
    speakers: List[int]
    updated_at: str


@dataclass
class HackerTrackerDocuments:
    """The four converted collections of one run."""
    event_types: List[HackerTrackerEventType]
    locations: List[HackerTrackerLocation]
    speakers: List[HackerTrackerSpeaker]
    events: List[HackerTrackerEvent]
