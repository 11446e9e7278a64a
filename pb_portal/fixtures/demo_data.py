"""
Demo fixture data.

Users carry a plaintext `password` for the local mock store and for
operator provisioning; it is stripped before anything is seeded into a
durable backend.
"""
from typing import Any, Dict, List

DEMO_USERS: List[Dict[str, Any]] = [
    {
        "uid": "user_admin",
        "email": "admin@committee.local",
        "username": "admin",
        "password": "admin123",
        "displayName": "Portal Administrator",
        "role": "admin",
    },
    {
        "uid": "user_louise_white",
        "email": "louise.white@committee.local",
        "username": "louise.white",
        "password": "committee123",
        "displayName": "Louise White",
        "role": "committee",
        "area": "Blaenavon",
        "roleDescription": "Resident representative",
    },
    {
        "uid": "user_gareth_jones",
        "email": "gareth.jones@committee.local",
        "username": "gareth.jones",
        "password": "committee123",
        "displayName": "Gareth Jones",
        "role": "committee",
        "area": "Thornhill & Upper Cwmbran",
    },
    {
        "uid": "user_rhian_davies",
        "email": "rhian.davies@committee.local",
        "username": "rhian.davies",
        "password": "committee123",
        "displayName": "Rhian Davies",
        "role": "committee",
        "area": "Trevethin, Penygarn & St. Cadocs",
    },
    {
        "uid": "user_applicant",
        "email": "applicant@example.com",
        "password": "applicant123",
        "displayName": "Sam Evans",
        "role": "applicant",
    },
    {
        "uid": "user_community_hub",
        "email": "hello@communityhub.example.org",
        "password": "applicant123",
        "displayName": "Community Hub",
        "role": "applicant",
    },
]

DEMO_APPS: List[Dict[str, Any]] = [
    {
        "id": "app_demo_1",
        "userId": "user_applicant",
        "orgName": "Blaenavon Allotment Society",
        "applicantName": "Sam Evans",
        "area": "Blaenavon",
        "projectTitle": "Community Growing Beds",
        "summary": "Raised beds and tools so residents can grow food together.",
        "totalCost": 2400,
        "amountRequested": 1800,
        "formData": {
            "contactAddress": "1 Broad Street, Blaenavon",
            "budgetBreakdown": [
                {"item": "Timber", "note": "Raised beds", "cost": 1200},
                {"item": "Tools", "note": "Shared tool store", "cost": 600},
            ],
        },
        "status": "Submitted-Stage1",
        "stage": 1,
        "ref": "PB-BLA-101",
        "createdAt": 1735689600000,
        "submissionMethod": "digital",
    },
    {
        "id": "app_demo_2",
        "userId": "user_community_hub",
        "orgName": "Community Hub",
        "applicantName": "Ffion Morgan",
        "area": "Cross-Area",
        "projectTitle": "Warm Spaces Network",
        "summary": "Warm, welcoming spaces across the borough through winter.",
        "totalCost": 6000,
        "amountRequested": 4500,
        "formData": {
            "multiArea": True,
            "areaBreakdown": "Sessions split evenly across all three areas.",
            "budgetBreakdown": [
                {"item": "Heating", "note": "Venue costs", "cost": 3000},
                {"item": "Refreshments", "note": "Weekly sessions", "cost": 1500},
            ],
        },
        "status": "Invited-Stage2",
        "stage": 1,
        "ref": "PB-CRO-214",
        "createdAt": 1735776000000,
        "submissionMethod": "digital",
    },
    {
        "id": "app_demo_3",
        "userId": "user_applicant",
        "orgName": "Thornhill Youth Club",
        "applicantName": "Sam Evans",
        "area": "Thornhill & Upper Cwmbran",
        "projectTitle": "Youth Music Studio",
        "summary": "A small recording studio run by and for young people.",
        "totalCost": 5000,
        "amountRequested": 3000,
        "formData": {
            "budgetBreakdown": [
                {"item": "Equipment", "note": "Microphones and interface", "cost": 2000},
                {"item": "Tutor", "note": "Weekly sessions", "cost": 1000},
            ],
            "marmotPrinciples": ["Give every child the best start in life"],
            "wfgGoals": ["A Wales of vibrant culture and thriving Welsh language"],
        },
        "status": "Submitted-Stage2",
        "stage": 2,
        "ref": "PB-THO-305",
        "createdAt": 1735862400000,
        "submissionMethod": "digital",
    },
    {
        "id": "app_demo_4",
        "userId": "user_community_hub",
        "orgName": "Penygarn Residents Group",
        "applicantName": "Alun Price",
        "area": "Trevethin, Penygarn & St. Cadocs",
        "projectTitle": "Pocket Park Refresh",
        "summary": "New benches, planting and a litter-pick kit for the pocket park.",
        "totalCost": 3200,
        "amountRequested": 2500,
        "formData": {
            "budgetBreakdown": [
                {"item": "Benches", "note": "Two recycled benches", "cost": 1400},
                {"item": "Planting", "note": "Pollinator beds", "cost": 1100},
            ],
            "wfgGoals": ["A resilient Wales", "A healthier Wales"],
        },
        "status": "Finalist",
        "stage": 2,
        "ref": "PB-TRE-412",
        "createdAt": 1735948800000,
        "submissionMethod": "digital",
    },
]
