"""Shared frab sample documents."""
import json

import pytest


@pytest.fixture
def schedule_data():
    """Two days, three rooms, repeated rooms and types across days."""
    return {
        'schedule': {
            'version': '1.0',
            'conference': {
                'acronym': 'camp24',
                'title': 'Example Camp 2024',
                'days': [
                    {
                        'index': 1,
                        'date': '2024-06-01',
                        'rooms': {
                            'Main': [
                                {
                                    'id': 11,
                                    'title': 'Opening',
                                    'abstract': 'Welcome everyone',
                                    'type': 'talk',
                                    'date': '2024-06-01T09:00:00+02:00',
                                    'duration': '0:30',
                                    'room': 'Main',
                                    'links': [
                                        {'url': 'https://example.org/opening', 'title': 'Slides'},
                                        {'url': 'https://example.org/other', 'title': 'Other'}
                                    ],
                                    'persons': [{'id': 1, 'public_name': 'Ada'}]
                                },
                                {
                                    'id': 12,
                                    'title': 'Soldering',
                                    'abstract': None,
                                    'type': 'hands_on_workshop',
                                    'date': '2024-06-01T22:30:00+02:00',
                                    'duration': '2:15',
                                    'room': 'Main',
                                    'links': [],
                                    'persons': [
                                        {'id': 2, 'public_name': 'Grace'},
                                        {'id': 1, 'public_name': 'Ada'}
                                    ]
                                }
                            ],
                            'Hall B': [
                                {
                                    'id': 13,
                                    'title': 'Lightning',
                                    'abstract': 'Short ones',
                                    'type': 'talk',
                                    'date': '2024-06-01T11:00:00+02:00',
                                    'duration': '1:00',
                                    'room': 'Hall B',
                                    'persons': []
                                }
                            ]
                        }
                    },
                    {
                        'index': 2,
                        'date': '2024-06-02',
                        'rooms': {
                            'Main': [
                                {
                                    'id': 21,
                                    'title': 'Closing',
                                    'abstract': 'Bye',
                                    'type': 'talk',
                                    'date': '2024-06-02T17:00:00+02:00',
                                    'duration': '00:45',
                                    'room': 'Main',
                                    'links': [],
                                    'persons': []
                                }
                            ],
                            'Tent': [
                                {
                                    'id': 22,
                                    'title': 'Film night',
                                    'abstract': '',
                                    'type': 'movie',
                                    'date': '2024-06-02T21:00:00+02:00',
                                    'duration': '3:05',
                                    'room': 'Tent',
                                    'links': [],
                                    'persons': []
                                }
                            ]
                        }
                    }
                ]
            }
        }
    }


@pytest.fixture
def speakers_data():
    """Speakers matching the persons in schedule_data."""
    return {
        'schedule_speakers': {
            'version': '1.0',
            'speakers': [
                {
                    'id': 1,
                    'public_name': 'Ada',
                    'abstract': 'Mathematician',
                    'links': [{'url': 'https://example.org/ada', 'title': 'Home'}]
                },
                {
                    'id': 2,
                    'public_name': 'Grace',
                    'abstract': None,
                    'links': []
                }
            ]
        }
    }


@pytest.fixture
def schedule_body(schedule_data):
    return json.dumps(schedule_data).encode('utf-8')


@pytest.fixture
def speakers_body(speakers_data):
    return json.dumps(speakers_data).encode('utf-8')
