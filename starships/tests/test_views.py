from unittest import mock

from django.test import Client, TestCase
from django.urls import reverse

from starships.exceptions import ConcurrencyConflict
from starships.models import Starship

from .helpers import create_starship


def form_data(**overrides):
    data = {
        "name": "Y-Wing",
        "model": "BTL-A4",
        "manufacturer": "Koensayr Manufacturing",
        "starship_class": "Assault Starfighter",
        "crew": "2",
        "passengers": "0",
    }
    data.update(overrides)
    return data


class StarshipViewTests(TestCase):
    def setUp(self):
        self.client = Client()
        self.ship = create_starship()

    def test_root_redirects_to_list(self):
        resp = self.client.get("/")
        self.assertRedirects(resp, "/records")

    def test_list(self):
        create_starship(name="Millennium Falcon")

        resp = self.client.get("/records")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.context["starships"]), 2)
        self.assertContains(resp, "Millennium Falcon")

    def test_detail(self):
        resp = self.client.get(f"/records/{self.ship.pk}")

        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, "Incom Corporation")

    def test_detail_missing(self):
        resp = self.client.get("/records/999")
        self.assertEqual(resp.status_code, 404)

    def test_create_form(self):
        resp = self.client.get("/records/create")
        self.assertEqual(resp.status_code, 200)

    def test_create_redirects_to_list(self):
        resp = self.client.post("/records/create", data=form_data())

        self.assertRedirects(resp, reverse("starship_list"))
        self.assertTrue(Starship.objects.filter(name="Y-Wing").exists())

    def test_create_invalid_redisplays_form(self):
        resp = self.client.post("/records/create", data=form_data(name=""))

        self.assertEqual(resp.status_code, 200)
        self.assertIn("name", resp.context["form"].errors)
        self.assertContains(resp, "BTL-A4")
        self.assertEqual(Starship.objects.count(), 1)

    def test_edit_form_carries_id_and_version(self):
        resp = self.client.get(f"/records/{self.ship.pk}/edit")

        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, f'name="id" value="{self.ship.pk}"')
        self.assertContains(resp, 'name="version" value="1"')

    def test_edit_form_missing(self):
        resp = self.client.get("/records/999/edit")
        self.assertEqual(resp.status_code, 404)

    def test_edit_updates_and_redirects(self):
        resp = self.client.post(
            f"/records/{self.ship.pk}/edit",
            data=form_data(id=self.ship.pk, version=1),
        )

        self.assertRedirects(resp, "/records")
        self.ship.refresh_from_db()
        self.assertEqual(self.ship.name, "Y-Wing")
        self.assertEqual(self.ship.version, 2)

    def test_edit_id_mismatch(self):
        resp = self.client.post(
            f"/records/{self.ship.pk}/edit",
            data=form_data(id=self.ship.pk + 1),
        )

        self.assertEqual(resp.status_code, 400)
        self.ship.refresh_from_db()
        self.assertEqual(self.ship.name, "X-Wing")

    def test_edit_unreadable_version(self):
        resp = self.client.post(
            f"/records/{self.ship.pk}/edit",
            data=form_data(id=self.ship.pk, version="abc"),
        )

        self.assertEqual(resp.status_code, 400)
        self.ship.refresh_from_db()
        self.assertEqual(self.ship.name, "X-Wing")

    def test_edit_missing(self):
        resp = self.client.post("/records/999/edit", data=form_data(id=999))
        self.assertEqual(resp.status_code, 404)

    def test_edit_invalid_redisplays_form(self):
        resp = self.client.post(
            f"/records/{self.ship.pk}/edit",
            data=form_data(id=self.ship.pk, crew=""),
        )

        self.assertEqual(resp.status_code, 200)
        self.assertIn("crew", resp.context["form"].errors)

    def test_edit_stale_version_is_server_error(self):
        Starship.objects.filter(pk=self.ship.pk).update(version=3)
        client = Client(raise_request_exception=False)

        resp = client.post(
            f"/records/{self.ship.pk}/edit",
            data=form_data(id=self.ship.pk, version=1),
        )

        self.assertEqual(resp.status_code, 500)

    def test_edit_conflict_after_delete_is_not_found(self):
        def delete_then_conflict(instance):
            Starship.objects.filter(pk=instance.pk).delete()
            raise ConcurrencyConflict("row vanished")

        with mock.patch.object(Starship, 'save_versioned', autospec=True, side_effect=delete_then_conflict):
            resp = self.client.post(
                f"/records/{self.ship.pk}/edit",
                data=form_data(id=self.ship.pk),
            )

        self.assertEqual(resp.status_code, 404)

    def test_delete_confirmation(self):
        resp = self.client.get(f"/records/{self.ship.pk}/delete")

        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, "Are you sure")

    def test_delete_confirmation_missing(self):
        resp = self.client.get("/records/999/delete")
        self.assertEqual(resp.status_code, 404)

    def test_delete(self):
        resp = self.client.post(f"/records/{self.ship.pk}/delete")

        self.assertRedirects(resp, "/records")
        self.assertFalse(Starship.objects.exists())

    def test_delete_missing_still_redirects(self):
        resp = self.client.post("/records/999/delete")

        self.assertRedirects(resp, "/records")
        self.assertEqual(Starship.objects.count(), 1)
