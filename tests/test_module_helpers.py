import httpx

from mts_sms import clients as mts
from mts_sms.clients import SubmitBatch, SubmitMessage


def test_module_helpers_use_settings(monkeypatch, respx_mock):
    monkeypatch.setenv("MTS_SEND_ENDPOINT", "https://env.mts.test/send")
    monkeypatch.setenv("MTS_STATUS_ENDPOINT_TEMPLATE", "https://env.mts.test/status?messageIDs=%s")
    monkeypatch.setenv("MTS_API_TOKEN", "env-token")
    send = respx_mock.post("https://env.mts.test/send").mock(
        return_value=httpx.Response(200, json={"status": 0, "data": {"submitResults": [
            {"msid": "79001234567", "messageID": 42, "code": "OK"},
        ]}})
    )
    status = respx_mock.get(host="env.mts.test", path="/status").mock(
        return_value=httpx.Response(200, json={"code": 0, "data": [
            {"messageID": 42, "statuses": [{"msid": "79001234567", "status": "Delivered", "cost": 2}]},
        ]})
    )

    batch = SubmitBatch(submits=[SubmitMessage(msid="79001234567", message="hi")])
    mts.send_sms(batch)
    assert batch.submits[0].message_id == 42
    assert send.calls.last.request.headers["Authorization"] == "Bearer env-token"

    st = mts.get_sms_status(42, "explicit-token")
    assert st.is_delivered and st.cost == 2.0
    assert status.calls.last.request.headers["Authorization"] == "Bearer explicit-token"

    assert mts.get_sms_statuses([]) == []
    assert mts.get_client() is mts.get_client()
