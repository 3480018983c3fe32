"""Built-in demo collections served by FixtureSource."""

REPORTS = [
    {
        "id": 1,
        "open_space_name": "City Park",
        "street": "Park Avenue",
        "reporter_name": "John Doe",
        "latitude": 34.0522,
        "longitude": -118.2437,
        "description": "Illegal dumping of construction waste near the main entrance.",
        "is_resolved": False,
        "photos": [
            "https://picsum.photos/400?random=1",
            "https://picsum.photos/400?random=2",
        ],
        "date_reported": "2024-07-25T10:00:00Z",
    },
    {
        "id": 2,
        "open_space_name": "Community Garden",
        "street": "Garden Street",
        "reporter_name": "Jane Smith",
        "latitude": 34.0522,
        "longitude": -118.2437,
        "description": "Someone is building an unauthorized shed in the middle of the garden.",
        "is_resolved": True,
        "photos": ["https://picsum.photos/400?random=3"],
        "date_reported": "2024-07-20T14:30:00Z",
    },
    {
        "id": 3,
        "open_space_name": "Riverfront Promenade",
        "street": "Riverside Drive",
        "reporter_name": "Peter Jones",
        "latitude": 34.0522,
        "longitude": -118.2437,
        "description": "Vandalism and graffiti on the benches and walkway.",
        "is_resolved": False,
        "photos": [
            "https://picsum.photos/400?random=4",
            "https://picsum.photos/400?random=5",
        ],
        "date_reported": "2024-07-22T08:15:00Z",
    },
]

OPEN_SPACES = [
    {"id": 1, "name": "City Park", "address": "123 Park Ave", "lat": 34.0522, "lng": -118.2437, "status": "Active"},
    {"id": 2, "name": "Community Garden", "address": "456 Garden St", "lat": 34.0535, "lng": -118.245, "status": "Active"},
    {"id": 3, "name": "Riverfront Promenade", "address": "789 Riverside Dr", "lat": 34.054, "lng": -118.2465, "status": "Inactive"},
    {"id": 4, "name": "Westside Fields", "address": "101 Field Ln", "lat": 34.051, "lng": -118.242, "status": "Active"},
    {"id": 5, "name": "Central Plaza", "address": "202 Plaza Blvd", "lat": 34.0555, "lng": -118.2475, "status": "Under Maintenance"},
]

NOTIFICATIONS = [
    {
        "id": 1,
        "title": "New Report Submitted",
        "message": "Illegal dumping reported at City Park",
        "type": "warning",
        "timestamp": "2 minutes ago",
        "is_read": False,
    },
    {
        "id": 2,
        "title": "Report Resolved",
        "message": "Community Garden shed issue has been resolved",
        "type": "success",
        "timestamp": "1 hour ago",
        "is_read": False,
    },
    {
        "id": 3,
        "title": "System Update",
        "message": "Dashboard maintenance scheduled for tonight",
        "type": "info",
        "timestamp": "3 hours ago",
        "is_read": True,
    },
    {
        "id": 4,
        "title": "New User Registration",
        "message": "5 new users registered today",
        "type": "info",
        "timestamp": "5 hours ago",
        "is_read": True,
    },
    {
        "id": 5,
        "title": "High Priority Report",
        "message": "Vandalism at Riverfront Promenade needs attention",
        "type": "warning",
        "timestamp": "1 day ago",
        "is_read": False,
    },
]

BY_ENTITY = {
    "reports": REPORTS,
    "open_spaces": OPEN_SPACES,
}
