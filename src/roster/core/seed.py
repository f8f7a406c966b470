"""Seed roster loaded at session start.

Ten fixed records covering every availability state and the three
mission-critical roles. Readiness is derived, so it is not listed here.
"""

from roster.core.entities import Availability
from roster.core.personnel import PersonnelRecord

_SEED = [
    dict(
        id="001", name="Capt. Alex Thompson", rank="Captain", role="Pilot",
        skills=["Fighter Operations", "Night Ops", "Air-to-Air Combat"],
        health_score=92, training_score=88,
        availability=Availability.AVAILABLE, years_of_service=8,
        deployment_status="Home Base", last_training_date="2024-12-15",
        medical_restrictions=[], location="Base Alpha",
        phone_number="+1-555-0101", email="a.thompson@iaf.mil",
    ),
    dict(
        id="002", name="Lt. Sarah Wilson", rank="Lieutenant", role="Engineer",
        skills=["Aircraft Maintenance", "Electronics", "Systems Analysis"],
        health_score=85, training_score=94,
        availability=Availability.AVAILABLE, years_of_service=5,
        deployment_status="Home Base", last_training_date="2024-12-10",
        medical_restrictions=[], location="Base Alpha",
        phone_number="+1-555-0102", email="s.wilson@iaf.mil",
    ),
    dict(
        id="003", name="Sgt. Mike Johnson", rank="Sergeant", role="Medic",
        skills=["Emergency Medicine", "Field Surgery", "Triage"],
        health_score=78, training_score=91,
        availability=Availability.DEPLOYED, years_of_service=12,
        deployment_status="Forward Base Charlie", last_training_date="2024-11-20",
        medical_restrictions=["Limited Heavy Lifting"],
        location="Forward Base Charlie",
        phone_number="+1-555-0103", email="m.johnson@iaf.mil",
    ),
    dict(
        id="004", name="Maj. Lisa Chen", rank="Major", role="Intelligence",
        skills=["Data Analysis", "Surveillance", "Threat Assessment"],
        health_score=89, training_score=96,
        availability=Availability.AVAILABLE, years_of_service=10,
        deployment_status="Home Base", last_training_date="2024-12-18",
        medical_restrictions=[], location="Base Alpha",
        phone_number="+1-555-0104", email="l.chen@iaf.mil",
    ),
    dict(
        id="005", name="Lt. Col. Robert Davis", rank="Lieutenant Colonel",
        role="Pilot",
        skills=["Transport Operations", "Formation Flying", "Navigation"],
        health_score=82, training_score=85,
        availability=Availability.LEAVE, years_of_service=15,
        deployment_status="Home Base", last_training_date="2024-10-15",
        medical_restrictions=["Vision Correction Required"],
        location="Base Alpha",
        phone_number="+1-555-0105", email="r.davis@iaf.mil",
    ),
    dict(
        id="006", name="Cpl. Emma Rodriguez", rank="Corporal",
        role="Communications",
        skills=["Radio Operations", "Satellite Comm", "Encryption"],
        health_score=91, training_score=87,
        availability=Availability.AVAILABLE, years_of_service=4,
        deployment_status="Home Base", last_training_date="2024-12-05",
        medical_restrictions=[], location="Base Alpha",
        phone_number="+1-555-0106", email="e.rodriguez@iaf.mil",
    ),
    dict(
        id="007", name="Capt. James Anderson", rank="Captain", role="Engineer",
        skills=["Avionics", "Radar Systems", "Electronic Warfare"],
        health_score=76, training_score=92,
        availability=Availability.MEDICAL, years_of_service=9,
        deployment_status="Home Base", last_training_date="2024-11-28",
        medical_restrictions=["Temporary Duty Restriction"],
        location="Base Alpha",
        phone_number="+1-555-0107", email="j.anderson@iaf.mil",
    ),
    dict(
        id="008", name="Lt. Maria Gonzalez", rank="Lieutenant", role="Pilot",
        skills=["Helicopter Operations", "Search & Rescue", "Medical Evacuation"],
        health_score=94, training_score=89,
        availability=Availability.AVAILABLE, years_of_service=6,
        deployment_status="Home Base", last_training_date="2024-12-12",
        medical_restrictions=[], location="Base Alpha",
        phone_number="+1-555-0108", email="m.gonzalez@iaf.mil",
    ),
    dict(
        id="009", name="MSgt. David Kim", rank="Master Sergeant", role="Security",
        skills=["Base Security", "Counter-Intelligence", "Weapons Training"],
        health_score=87, training_score=93,
        availability=Availability.AVAILABLE, years_of_service=14,
        deployment_status="Home Base", last_training_date="2024-12-08",
        medical_restrictions=[], location="Base Alpha",
        phone_number="+1-555-0109", email="d.kim@iaf.mil",
    ),
    dict(
        id="010", name="Capt. Jennifer Brown", rank="Captain", role="Logistics",
        skills=["Supply Chain", "Resource Planning", "Transportation"],
        health_score=83, training_score=88,
        availability=Availability.AVAILABLE, years_of_service=7,
        deployment_status="Home Base", last_training_date="2024-11-30",
        medical_restrictions=[], location="Base Alpha",
        phone_number="+1-555-0110", email="j.brown@iaf.mil",
    ),
]


def seed_personnel() -> list[PersonnelRecord]:
    """Return a fresh copy of the seed roster."""
    return [PersonnelRecord(**row) for row in _SEED]
