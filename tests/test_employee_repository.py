"""Tests for the SQLite employee repository."""

import sqlite3

import pytest

from employee_api.app.models.employee import Employee


def make_employee(first_name: str = "John", last_name: str = "Doe", email: str = "john.doe@example.com") -> Employee:
    return Employee(first_name=first_name, last_name=last_name, email=email)


class TestSave:
    def test_save_assigns_identifier(self, repository):
        saved = repository.save(make_employee())

        assert saved.id is not None
        assert saved.first_name == "John"
        assert saved.last_name == "Doe"
        assert saved.email == "john.doe@example.com"

    def test_save_with_id_inserts_when_absent(self, repository):
        saved = repository.save(Employee(id=42, first_name="John", last_name="Doe", email="john.doe@example.com"))

        assert saved.id == 42
        assert repository.find_by_id(42) == saved

    def test_save_with_existing_id_updates_in_place(self, repository):
        saved = repository.save(make_employee())

        updated = repository.save(
            Employee(id=saved.id, first_name="Jane", last_name="Roe", email="jane@gmail.com")
        )

        assert updated.id == saved.id
        assert repository.count() == 1
        assert repository.find_by_id(saved.id).first_name == "Jane"
        assert repository.find_by_email("john.doe@example.com") is None

    def test_duplicate_email_rejected_by_database(self, repository):
        repository.save(make_employee())

        with pytest.raises(sqlite3.IntegrityError):
            repository.save(make_employee(first_name="Johnny"))
        assert repository.count() == 1

    def test_save_all_keeps_order(self, repository):
        saved = repository.save_all([
            make_employee("John", "Doe", "john.doe@example.com"),
            make_employee("Jane", "Doe", "jane.doe@example.com"),
        ])

        assert [e.first_name for e in saved] == ["John", "Jane"]
        assert saved[0].id < saved[1].id


class TestFind:
    def test_find_all_returns_every_record(self, repository):
        for i in range(3):
            repository.save(make_employee(email=f"user{i}@example.com"))

        employees = repository.find_all()

        assert len(employees) == 3
        assert [e.email for e in employees] == [
            "user0@example.com",
            "user1@example.com",
            "user2@example.com",
        ]

    def test_find_all_empty(self, repository):
        assert repository.find_all() == []

    def test_find_by_id_missing(self, repository):
        assert repository.find_by_id(999) is None

    def test_find_by_id_after_insert(self, repository):
        saved = repository.save(make_employee())

        found = repository.find_by_id(saved.id)

        assert found == saved

    def test_find_by_email(self, repository):
        john = repository.save(make_employee())

        found = repository.find_by_email("john.doe@example.com")

        assert found is not None
        assert found.first_name == john.first_name
        assert found.last_name == john.last_name
        assert found.email == john.email

    def test_find_by_email_missing(self, repository):
        repository.save(make_employee())

        assert repository.find_by_email("nobody@example.com") is None

    def test_exists_by_id(self, repository):
        saved = repository.save(make_employee())

        assert repository.exists_by_id(saved.id)
        assert not repository.exists_by_id(saved.id + 1)


class TestDelete:
    def test_delete_by_id(self, repository):
        saved = repository.save(make_employee())

        repository.delete_by_id(saved.id)

        assert repository.find_by_id(saved.id) is None
        assert repository.count() == 0

    def test_delete_missing_id_is_noop(self, repository):
        repository.save(make_employee())

        repository.delete_by_id(12345)

        assert repository.count() == 1

    def test_delete_all(self, repository):
        repository.save(make_employee(email="a@example.com"))
        repository.save(make_employee(email="b@example.com"))

        repository.delete_all()

        assert repository.find_all() == []

    def test_email_free_again_after_delete(self, repository):
        saved = repository.save(make_employee())
        repository.delete_by_id(saved.id)

        again = repository.save(make_employee())

        assert again.id is not None
