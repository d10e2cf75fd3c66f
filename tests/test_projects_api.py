import uuid


def _create(client, title='Site', owner='Ana'):
    r = client.post('/projects', json={'title': title, 'owner': owner})
    assert r.status_code == 200
    return r.json()


def test_list_projects_starts_empty(client):
    r = client.get('/projects')
    assert r.status_code == 200
    assert r.json() == []


def test_create_project_echoes_payload(client):
    project = _create(client)
    assert project['title'] == 'Site'
    assert project['owner'] == 'Ana'
    assert uuid.UUID(project['id']).version == 4
    assert client.get('/projects').json() == [project]


def test_created_ids_are_distinct(client):
    ids = {_create(client, title=f'p{i}')['id'] for i in range(25)}
    assert len(ids) == 25


def test_create_project_without_body(client):
    r = client.post('/projects')
    assert r.status_code == 200
    assert r.json()['title'] is None
    assert r.json()['owner'] is None


def test_filter_by_title_substring(client):
    site = _create(client, title='Site')
    _create(client, title='App')
    mobile_site = _create(client, title='Mobile Site')
    r = client.get('/projects', params={'title': 'Si'})
    assert r.json() == [site]
    r = client.get('/projects', params={'title': 'Site'})
    assert r.json() == [site, mobile_site]


def test_filter_is_case_sensitive(client):
    _create(client, title='Site')
    assert client.get('/projects', params={'title': 'site'}).json() == []


def test_empty_filter_returns_all(client):
    _create(client, title='Site')
    _create(client, title='App')
    assert len(client.get('/projects', params={'title': ''}).json()) == 2
    assert len(client.get('/projects').json()) == 2


def test_update_project_keeps_id(client):
    project = _create(client)
    r = client.put(f"/projects/{project['id']}", json={'title': 'Portal', 'owner': 'Bia'})
    assert r.status_code == 200
    assert r.json() == {'id': project['id'], 'title': 'Portal', 'owner': 'Bia'}
    assert client.get('/projects').json() == [r.json()]


def test_update_unknown_project(client):
    project = _create(client)
    r = client.put(f'/projects/{uuid.uuid4()}', json={'title': 'Portal', 'owner': 'Bia'})
    assert r.status_code == 400
    assert r.json() == {'error': 'Project not found.'}
    assert client.get('/projects').json() == [project]


def test_update_with_invalid_id(client):
    r = client.put('/projects/123', json={'title': 'Portal', 'owner': 'Bia'})
    assert r.status_code == 400
    assert r.json() == {'error': 'Invalid project ID.'}


def test_delete_project(client):
    project = _create(client)
    other = _create(client, title='App')
    r = client.delete(f"/projects/{project['id']}")
    assert r.status_code == 204
    assert r.content == b''
    assert client.get('/projects').json() == [other]


def test_delete_unknown_project(client):
    project = _create(client)
    r = client.delete(f'/projects/{uuid.uuid4()}')
    assert r.status_code == 400
    assert r.json() == {'error': 'Project not found.'}
    assert client.get('/projects').json() == [project]


def test_delete_with_invalid_id(client):
    r = client.delete('/projects/not-a-uuid')
    assert r.status_code == 400
    assert r.json() == {'error': 'Invalid project ID.'}


def test_deleted_project_cannot_be_deleted_again(client):
    project = _create(client)
    assert client.delete(f"/projects/{project['id']}").status_code == 204
    r = client.delete(f"/projects/{project['id']}")
    assert r.status_code == 400
    assert r.json() == {'error': 'Project not found.'}


def test_create_project_rejects_malformed_json(client):
    r = client.post('/projects', content=b'{"title": ', headers={'Content-Type': 'application/json'})
    assert r.status_code == 400
    assert r.json() == {'error': 'Malformed JSON body.'}
    assert client.get('/projects').json() == []


def test_create_project_rejects_non_string_fields(client):
    r = client.post('/projects', json={'title': ['Site'], 'owner': 'Ana'})
    assert r.status_code == 400
    assert r.json() == {'error': 'Invalid request body.'}
    assert client.get('/projects').json() == []


def test_update_project_rejects_malformed_json(client):
    project = _create(client)
    r = client.put(f"/projects/{project['id']}", content=b'{"title": ', headers={'Content-Type': 'application/json'})
    assert r.status_code == 400
    assert r.json() == {'error': 'Malformed JSON body.'}
    assert client.get('/projects').json() == [project]


def test_update_project_rejects_non_string_fields(client):
    project = _create(client)
    r = client.put(f"/projects/{project['id']}", json={'title': 'Portal', 'owner': {'name': 'Bia'}})
    assert r.status_code == 400
    assert r.json() == {'error': 'Invalid request body.'}
    assert client.get('/projects').json() == [project]
