import pytest
from dinner.app import create_storage, create_store
from dinner.domain.Ingredient import Ingredient
from dinner.infra.Storage import JsonFileStorage, MemoryStorage


def test_create_storage_backends(tmp_path):
    assert isinstance(create_storage("memory"), MemoryStorage)
    file_storage = create_storage("file", tmp_path)
    assert isinstance(file_storage, JsonFileStorage)
    assert file_storage.data_dir == tmp_path
    with pytest.raises(ValueError):
        create_storage("cloud")


def test_create_store_wires_storage_and_bus():
    storage = MemoryStorage()
    store = create_store(storage)
    seen = []
    store.subscribe(lambda name, payload: seen.append(name))
    store.add_ingredient(Ingredient("Egg"))
    assert seen == ["pantry.changed"]
    assert create_store(storage).available_ingredients == store.available_ingredients
