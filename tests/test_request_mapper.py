from hopp2postman.generator.models import FormDataBody, RawBody, UrlencodedBody
from hopp2postman.generator.request import map_request
from hopp2postman.parser.base import HoppRequest


def _make_request(**overrides) -> HoppRequest:
    data = {
        "v": "1",
        "name": "Get users",
        "method": "GET",
        "endpoint": "<<baseUrl>>/api/users",
        "params": [],
        "headers": [],
        "preRequestScript": "",
        "testScript": "",
        "auth": {"authType": "none", "authActive": True},
        "body": {"contentType": None, "body": None},
    }
    data.update(overrides)
    return HoppRequest.model_validate(data)


class TestRequestBasics:
    def test_name_and_method(self):
        item = map_request(_make_request())
        assert item.name == "Get users"
        assert item.request.method == "GET"
        assert item.response == []

    def test_url_is_rewritten(self):
        item = map_request(_make_request(endpoint="<<baseUrl>>/users/<<id>>?v=<<ver>>"))
        url = item.request.url
        assert url.raw == "{{baseUrl}}/users/{{id}}?v={{ver}}"
        assert url.host == ["{{baseUrl}}"]
        assert url.path == ["users", "{{id}}"]
        assert url.query[0].value == "{{ver}}"

    def test_auth_not_mapped(self):
        item = map_request(_make_request(auth={"authType": "bearer", "authActive": True, "token": "t"}))
        dumped = item.model_dump()
        assert "auth" not in dumped["request"]


class TestHeaders:
    def test_active_headers_only_in_order(self):
        item = map_request(_make_request(headers=[
            {"key": "Accept", "value": "application/json", "active": True},
            {"key": "X-Off", "value": "1", "active": False},
            {"key": "Authorization", "value": "Bearer <<token>>", "active": True},
        ]))
        headers = [(h.key, h.value) for h in item.request.header]
        assert headers == [("Accept", "application/json"), ("Authorization", "Bearer {{token}}")]

    def test_all_inactive(self):
        item = map_request(_make_request(headers=[{"key": "A", "value": "1", "active": False}]))
        assert item.request.header == []


class TestParams:
    def test_params_appended_after_endpoint_query(self):
        item = map_request(_make_request(
            endpoint="<<baseUrl>>/api/users?active=true",
            params=[
                {"key": "active", "value": "false", "active": True},
                {"key": "page", "value": "<<page>>", "active": True},
                {"key": "debug", "value": "1", "active": False},
            ],
        ))
        query = [(q.key, q.value) for q in item.request.url.query]
        assert query == [("active", "true"), ("active", "false"), ("page", "{{page}}")]

    def test_params_do_not_change_raw(self):
        item = map_request(_make_request(params=[{"key": "page", "value": "1", "active": True}]))
        assert item.request.url.raw == "{{baseUrl}}/api/users"


class TestBody:
    def test_json_body(self):
        item = map_request(_make_request(body={
            "contentType": "application/json",
            "body": '{"name":"<<user>>"}',
        }))
        body = item.request.body
        assert isinstance(body, RawBody)
        assert body.mode == "raw"
        assert body.raw == '{"name":"{{user}}"}'

    def test_urlencoded_body(self):
        item = map_request(_make_request(body={
            "contentType": "application/x-www-form-urlencoded",
            "body": "a=1&b=<<x>>",
        }))
        body = item.request.body
        assert isinstance(body, UrlencodedBody)
        assert [(p.key, p.value) for p in body.urlencoded] == [("a", "1"), ("b", "{{x}}")]

    def test_urlencoded_empty_body(self):
        item = map_request(_make_request(body={
            "contentType": "application/x-www-form-urlencoded",
            "body": "",
        }))
        assert item.request.body == UrlencodedBody(urlencoded=[])

    def test_formdata_body(self):
        item = map_request(_make_request(body={
            "contentType": "multipart/form-data",
            "body": [
                {"key": "name", "active": True, "isFile": False, "value": "<<user>>"},
                {"key": "avatar", "active": True, "isFile": True, "value": ["first", "second"]},
                {"key": "off", "active": False, "isFile": False, "value": "kept"},
            ],
        }))
        body = item.request.body
        assert isinstance(body, FormDataBody)
        entries = [(f.key, f.value, f.type) for f in body.formdata]
        assert entries == [
            ("name", "{{user}}", "text"),
            ("avatar", "first", "file"),
            ("off", "kept", "text"),
        ]

    def test_formdata_file_without_blobs(self):
        item = map_request(_make_request(body={
            "contentType": "multipart/form-data",
            "body": [{"key": "f", "active": True, "isFile": True, "value": []}],
        }))
        assert item.request.body.formdata[0].value is None

    def test_other_textual_types_give_empty_raw(self):
        for content_type in ("application/xml", "text/plain", "text/html", "application/ld+json"):
            item = map_request(_make_request(body={"contentType": content_type, "body": "<a><<x>></a>"}))
            assert item.request.body == RawBody(raw="")

    def test_null_body(self):
        item = map_request(_make_request())
        assert item.request.body == RawBody(raw="")
