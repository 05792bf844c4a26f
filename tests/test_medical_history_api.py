BASE = "/lifeStyleAndHistory/medicalHistory"


def _create(client, **payload) -> int:
    response = client.post(BASE, json=payload)
    assert response.status_code == 201
    return int(response.headers["location"].rsplit("/", 1)[-1])


def test_hello(client):
    response = client.get(BASE)

    assert response.status_code == 200
    assert response.text == "Hello from /lifeStyleAndHistory/medicalHistory/"


def test_create_returns_confirmation_and_location(client):
    response = client.post(BASE, json={"patientId": 1, "userId": 2, "allergies": "none"})

    assert response.status_code == 201
    assert response.text == "MedicalHistory Created Successfully"
    record_id = int(response.headers["location"].rsplit("/", 1)[-1])

    fetched = client.get(f"{BASE}/{record_id}")
    assert fetched.status_code == 200
    assert fetched.json() == {
        "recordId": record_id,
        "patientId": 1,
        "userId": 2,
        "allergies": "none",
        "currentMedication": None,
        "pastMedication": None,
        "chronicDiseases": None,
        "injuries": None,
        "surgeries": None,
    }


def test_update_merges_only_clinical_fields(client):
    record_id = _create(client, patientId=1, userId=2, allergies="none")

    response = client.put(
        f"{BASE}/{record_id}",
        json={"allergies": "peanuts", "currentMedication": "X", "patientId": 99, "userId": 98},
    )

    assert response.status_code == 200
    assert response.text == "MedicalHistory Updated Successfully"
    body = client.get(f"{BASE}/{record_id}").json()
    assert body["patientId"] == 1
    assert body["userId"] == 2
    assert body["allergies"] == "peanuts"
    assert body["currentMedication"] == "X"


def test_missing_record_returns_404_and_leaves_store(client):
    record_id = _create(client, patientId=1, userId=2)

    for response in (
        client.get(f"{BASE}/999"),
        client.put(f"{BASE}/999", json={"allergies": "dust"}),
        client.delete(f"{BASE}/999"),
    ):
        assert response.status_code == 404
        assert "999" in response.json()["detail"]

    assert [r["recordId"] for r in client.get(f"{BASE}/all").json()] == [record_id]


def test_delete_by_record_id(client):
    record_id = _create(client, patientId=1, userId=2)

    response = client.delete(f"{BASE}/{record_id}")

    assert response.status_code == 200
    assert response.text == "MedicalHistory Deleted Successfully"
    assert client.get(f"{BASE}/{record_id}").status_code == 404


def test_delete_by_patient_and_user(client):
    _create(client, patientId=1, userId=2)
    _create(client, patientId=1, userId=2)
    keep = _create(client, patientId=1, userId=3)

    response = client.delete(f"{BASE}/patient/1/user/2")

    assert response.status_code == 200
    assert [r["recordId"] for r in client.get(f"{BASE}/all").json()] == [keep]


def test_delete_by_patient_and_user_without_matches(client):
    keep = _create(client, patientId=1, userId=3)

    response = client.delete(f"{BASE}/patient/1/user/2")

    assert response.status_code == 404
    assert response.json() == {"detail": "MedicalHistory not found with patientId: 1 and userId: 2"}
    assert [r["recordId"] for r in client.get(f"{BASE}/all").json()] == [keep]


def test_list_by_patient_and_user(client):
    first = _create(client, patientId=7, userId=8, injuries="sprain")
    _create(client, patientId=7, userId=9)

    response = client.get(f"{BASE}/patient/7/user/8")

    assert response.status_code == 200
    assert [r["recordId"] for r in response.json()] == [first]
    assert client.get(f"{BASE}/patient/1/user/1").json() == []


def test_non_integer_id_is_rejected(client):
    assert client.get(f"{BASE}/abc").status_code == 422
