from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from modules.core.management.commands.seed_data import Command
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestSeedDataCommand:
    def test_creates_catalog(self):
        out = StringIO()
        call_command("seed_data", stdout=out)
        assert Product.objects.count() == len(Command.catalog)
        assert "Seed completed" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_data", stdout=StringIO())
        call_command("seed_data", stdout=StringIO())
        assert Product.objects.count() == len(Command.catalog)
