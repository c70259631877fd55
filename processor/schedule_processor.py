"""Build HackerTracker collections from a parsed frab schedule."""
import logging
from typing import List, Sequence, Tuple

from processor.event_times import compute_end
from processor.id_registry import IdRegistry
from processor.models import (
    FrabLink,
    FrabSchedule,
    FrabSpeaker,
    HackerTrackerDocuments,
    HackerTrackerEvent,
    HackerTrackerEventType,
    HackerTrackerLocation,
    HackerTrackerSpeaker,
)

logger = logging.getLogger(__name__)


def first_link(links: Sequence[FrabLink]) -> str:
    """Return the URL of the first link, or an empty string."""
    if links:
        return links[0].url
    return ''


def display_type_name(type_tag: str) -> str:
    """
    Turn a frab event type tag into a display name.

    Underscores become spaces and the first letter of every word is
    capitalized; the rest of each word is left as is.

    Args:
        type_tag: Raw type tag such as ``lightning_talk``

    Returns:
        Display name such as ``Lightning Talk``
    """
    words = type_tag.replace('_', ' ').split(' ')
    return ' '.join(word[:1].upper() + word[1:] for word in words)


def build_event_types(
    schedule: FrabSchedule,
    registry: IdRegistry,
    updated_at: str
) -> List[HackerTrackerEventType]:
    """
    Register every event type tag and build the event type collection.

    Args:
        schedule: Parsed frab schedule
        registry: Registry for event type tags, filled by this call
        updated_at: Run timestamp

    Returns:
        One HackerTrackerEventType per distinct type tag
    """
    conference = schedule.conference
    for day in conference.days:
        for events in day.rooms.values():
            for event in events:
                registry.assign(event.type)

    return [
        HackerTrackerEventType(
            id=type_id,
            conference=conference.acronym,
            name=display_type_name(type_tag),
            updated_at=updated_at
        )
        for type_tag, type_id in registry.items()
    ]


def build_locations(
    schedule: FrabSchedule,
    registry: IdRegistry,
    updated_at: str
) -> List[HackerTrackerLocation]:
    """
    Register every room name and build the location collection.

    Args:
        schedule: Parsed frab schedule
        registry: Registry for room names, filled by this call
        updated_at: Run timestamp

    Returns:
        One HackerTrackerLocation per distinct room
    """
    conference = schedule.conference
    for day in conference.days:
        for room in day.rooms:
            registry.assign(room)

    return [
        HackerTrackerLocation(
            id=location_id,
            conference=conference.acronym,
            name=room,
            updated_at=updated_at
        )
        for room, location_id in registry.items()
    ]


def build_speakers(
    schedule: FrabSchedule,
    speakers: Sequence[FrabSpeaker],
    base_id: int,
    updated_at: str
) -> List[HackerTrackerSpeaker]:
    """
    Map every frab speaker to a HackerTracker speaker.

    Args:
        schedule: Parsed frab schedule (for the conference acronym)
        speakers: Parsed frab speakers
        base_id: Offset added to every speaker id
        updated_at: Run timestamp

    Returns:
        Speakers in source order
    """
    return [
        HackerTrackerSpeaker(
            id=base_id + speaker.id,
            conference=schedule.conference.acronym,
            name=speaker.public_name,
            description=speaker.abstract,
            link=first_link(speaker.links),
            updated_at=updated_at
        )
        for speaker in speakers
    ]


def build_events(
    schedule: FrabSchedule,
    locations: IdRegistry,
    event_types: IdRegistry,
    base_id: int,
    updated_at: str
) -> List[HackerTrackerEvent]:
    """
    Build the event collection.

    Both registries must already hold every room and type tag of the
    schedule; they are only read here.

    Args:
        schedule: Parsed frab schedule
        locations: Populated room registry
        event_types: Populated event type registry
        base_id: Offset added to event and speaker ids
        updated_at: Run timestamp

    Returns:
        Events in day, room, source order

    Raises:
        MalformedTimestamp: If an event date cannot be parsed
        MalformedDuration: If an event duration cannot be parsed
        KeyError: If a room or type tag is missing from its registry
    """
    conference = schedule.conference
    events = []

    for day in conference.days:
        for events_in_room in day.rooms.values():
            for frab_event in events_in_room:
                end = compute_end(frab_event.date, frab_event.duration)
                events.append(HackerTrackerEvent(
                    id=base_id + frab_event.id,
                    conference=conference.acronym,
                    title=frab_event.title,
                    description=frab_event.abstract,
                    link=first_link(frab_event.links),
                    begin=frab_event.date,
                    end=end,
                    location=locations[frab_event.room],
                    event_type=event_types[frab_event.type],
                    speakers=[base_id + person.id for person in frab_event.persons],
                    updated_at=updated_at
                ))

    return events


class ScheduleProcessor:
    """Converts a frab schedule and speaker list into HackerTracker collections."""

    def __init__(self, base_id: int = 0, updated_at: str = ''):
        """
        Initialize the processor.

        Args:
            base_id: Offset added to every emitted id
            updated_at: Timestamp stamped on every record of the run
        """
        self.base_id = base_id
        self.updated_at = updated_at

    def process(
        self,
        schedule: FrabSchedule,
        speakers: Sequence[FrabSpeaker]
    ) -> HackerTrackerDocuments:
        """
        Build all four collections.

        Event types and locations are built first so that their registries
        are complete before any event is resolved against them.

        Args:
            schedule: Parsed frab schedule
            speakers: Parsed frab speakers

        Returns:
            HackerTrackerDocuments holding the four collections
        """
        event_types, type_registry = self.make_event_types(schedule)
        locations, location_registry = self.make_locations(schedule)
        hackertracker_speakers = build_speakers(
            schedule, speakers, self.base_id, self.updated_at
        )
        events = build_events(
            schedule,
            location_registry,
            type_registry,
            self.base_id,
            self.updated_at
        )

        logger.info(
            f"Built {len(event_types)} event types, {len(locations)} locations, "
            f"{len(hackertracker_speakers)} speakers, {len(events)} events"
        )
        return HackerTrackerDocuments(
            event_types=event_types,
            locations=locations,
            speakers=hackertracker_speakers,
            events=events
        )

    def make_event_types(
        self,
        schedule: FrabSchedule
    ) -> Tuple[List[HackerTrackerEventType], IdRegistry]:
        """Build event types with a fresh registry and return both."""
        registry = IdRegistry(self.base_id)
        return build_event_types(schedule, registry, self.updated_at), registry

    def make_locations(
        self,
        schedule: FrabSchedule
    ) -> Tuple[List[HackerTrackerLocation], IdRegistry]:
        """Build locations with a fresh registry and return both."""
        registry = IdRegistry(self.base_id)
        return build_locations(schedule, registry, self.updated_at), registry
