"""Seed script to populate the database with sample submissions."""

from contactdesk import create_app, shutdown_store

SAMPLE_SUBMISSIONS = [
    {
        'name': 'Priya Sharma',
        'email': 'priya@example.com',
        'phone': '9876543210',
        'service': 'Web Development',
        'message': 'We need a new landing page for our bakery before the festive season.'
    },
    {
        'name': 'Rahul Verma',
        'email': 'rahul@example.com',
        'service': 'SEO',
        'message': 'Our site dropped in search rankings last month. Can you audit it?'
    },
    {
        'name': 'Anita Desai',
        'email': 'anita@example.com',
        'phone': '9123456780',
        'service': 'Mobile App',
        'message': 'Looking for a quote on an ordering app for Android and iOS.'
    },
]


def seed_database(app=None):
    """Insert the sample submissions if the table is empty."""
    if app is None:
        app = create_app()

    with app.app_context():
        store = app.extensions['contact_store']

        if store.count():
            print('Database already seeded!')
            return 0

        print('Seeding database...')
        for fields in SAMPLE_SUBMISSIONS:
            store.insert(fields)

        print(f'Created {len(SAMPLE_SUBMISSIONS)} contact submissions.')
        return len(SAMPLE_SUBMISSIONS)


if __name__ == '__main__':
    application = create_app()
    try:
        seed_database(application)
    finally:
        shutdown_store(application)
