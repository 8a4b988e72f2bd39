from seed import SAMPLE_STUDENTS, seed_data


def test_seed_empty_collection(collection):
    inserted = seed_data(collection)

    assert inserted == len(SAMPLE_STUDENTS)
    assert {doc["name"] for doc in collection.find({})} == {s.name for s in SAMPLE_STUDENTS}


def test_seed_skips_when_data_exists(collection):
    seed_data(collection)

    assert seed_data(collection) == 0
    assert collection.count_documents({}) == len(SAMPLE_STUDENTS)
