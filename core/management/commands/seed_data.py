"""
Management command seeding the default users and a couple of Danish
hospitals with wards.  Safe to run repeatedly.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from core.models import Hospital, Role, WardType
from core.services.hospitals import create_hospital
from core.services.users import ensure_user
from core.services.wards import create_ward

USERS = [
    ("admin", "admin", Role.ADMIN),
    ("testUser", "password", Role.ADMIN),
]

HOSPITALS = [
    ("Rigshospitalet", "Blegdamsvej 9", "København", [(WardType.CARDIOLOGY, 30), (WardType.NEUROLOGY, 25)]),
    ("Aarhus Universitetshospital", "Palle Juul-Jensens Boulevard 99", "Aarhus", [(WardType.GENERAL_MEDICINE, 20)]),
]


class Command(BaseCommand):
    help = "Create default users and sample hospitals/wards (idempotent)."

    def handle(self, *args, **opts):
        for username, password, role in USERS:
            _, created = ensure_user(username, password, role)
            state = "created" if created else "exists"
            self.stdout.write(self.style.SUCCESS(f"{state}: {username} ({role})"))

        if Hospital.objects.exists():
            self.stdout.write("Hospitals already present, skipping hospital seed.")
            return

        with transaction.atomic():
            for name, address, city, wards in HOSPITALS:
                ward_ids = [create_ward(type=t, max_capacity=cap).pk for t, cap in wards]
                create_hospital(name=name, address=address, city=city, ward_ids=ward_ids)
                self.stdout.write(self.style.SUCCESS(f"created: {name} with {len(ward_ids)} ward(s)"))
        self.stdout.write(self.style.SUCCESS("Seed data ensured."))
