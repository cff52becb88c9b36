import re
import threading

from carehome.ids import IdGenerator


def test_each_kind_has_its_own_counter():
    ids = IdGenerator()
    assert ids.patient_id() == "P00001"
    assert ids.prescription_id() == "RX00001"
    assert ids.record_id() == "MR00001"
    assert ids.log_id() == "LOG000001"
    assert ids.patient_id() == "P00002"
    assert ids.log_id() == "LOG000002"


def test_ids_strictly_increase():
    ids = IdGenerator()
    drawn = [ids.prescription_id() for _ in range(25)]
    numbers = [int(value[2:]) for value in drawn]
    assert numbers == sorted(set(numbers))
    assert all(re.fullmatch(r"RX\d{5}", value) for value in drawn)


def test_ids_are_unique_across_threads():
    ids = IdGenerator()
    drawn = []
    lock = threading.Lock()

    def worker():
        local = [ids.patient_id() for _ in range(200)]
        with lock:
            drawn.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(drawn) == 1600
    assert len(set(drawn)) == 1600


def test_engine_log_ids_follow_operation_order(engine, manager, nurse, make_patient):
    engine.admit_patient(make_patient(), engine.find_bed("WA-R1-B1"), manager)
    log_ids = [log.log_id for log in engine.action_logs]
    assert log_ids == ["LOG000001", "LOG000002", "LOG000003"]


def test_registered_patients_get_sequential_ids(make_patient):
    assert make_patient("Alice").patient_id == "P00001"
    assert make_patient("Beth").patient_id == "P00002"
