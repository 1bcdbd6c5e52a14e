"""``manage.py lookup <query>``: answer a lookup from the command line."""

from __future__ import annotations

import asyncio

from django.core.management.base import BaseCommand, CommandError

from wikilookup.services import lookup


class Command(BaseCommand):
    help = 'Look up an article and print the reply with its links rewritten into commands.'

    def add_arguments(self, parser) -> None:
        parser.add_argument('query', nargs='+', help='Title or phrase to look up.')

    def handle(self, *args, **options) -> None:
        query = ' '.join(options['query']).strip()
        if not query:
            raise CommandError('Enter something to look up.')
        reply = asyncio.run(lookup(query))
        self.stdout.write(reply)
