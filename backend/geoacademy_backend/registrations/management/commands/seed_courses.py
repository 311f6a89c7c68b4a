from decimal import Decimal

from django.core.management.base import BaseCommand

from registrations.storage import get_storage


SAMPLE_COURSES = [
    {
        "id": "gis-fundamentals",
        "title": "GIS Fundamentals & ESRI ArcGIS",
        "description": "Master the basics of Geographic Information Systems using industry-standard "
                       "ESRI ArcGIS software. Perfect for beginners.",
        "level": "Beginner",
        "duration": "40 hours",
        "price": Decimal("299.00"),
    },
    {
        "id": "remote-sensing",
        "title": "Remote Sensing & Image Analysis",
        "description": "Learn advanced satellite image processing, spectral analysis, and environmental "
                       "monitoring techniques.",
        "level": "Intermediate",
        "duration": "60 hours",
        "price": Decimal("449.00"),
    },
    {
        "id": "spatial-analysis",
        "title": "Advanced Spatial Analysis & Modeling",
        "description": "Master complex spatial analysis, 3D modeling, and predictive analytics for "
                       "professional GIS applications.",
        "level": "Advanced",
        "duration": "80 hours",
        "price": Decimal("599.00"),
    },
    {
        "id": "python-gis",
        "title": "Python for Geospatial Analysis",
        "description": "Learn Python programming for GIS automation, data processing, and custom "
                       "geospatial applications.",
        "level": "Intermediate",
        "duration": "50 hours",
        "price": Decimal("399.00"),
    },
    {
        "id": "drone-surveying",
        "title": "Drone Surveying & Photogrammetry",
        "description": "Master UAV data collection, photogrammetry, and drone-based mapping for "
                       "professional surveying.",
        "level": "Specialized",
        "duration": "45 hours",
        "price": Decimal("549.00"),
    },
    {
        "id": "web-gis",
        "title": "Web GIS & Location Services",
        "description": "Build interactive web maps and location-based applications using modern web "
                       "technologies and APIs.",
        "level": "Professional",
        "duration": "55 hours",
        "price": Decimal("499.00"),
    },
]


class Command(BaseCommand):
    help = 'Loads the sample course catalog, skipping courses that already exist'

    def handle(self, *args, **options):
        storage = get_storage()
        created = 0
        for course in SAMPLE_COURSES:
            if storage.get_course(course["id"]) is not None:
                self.stdout.write(f'Course {course["id"]} already exists')
                continue
            storage.create_course(course)
            created += 1

        self.stdout.write(self.style.SUCCESS(f'{created} course(s) created'))
