import sys
from mts_sms.clients import get_sms_status
from mts_sms.services import MtsSmsProvider, get_sms_service

if __name__ == "__main__":
    if len(sys.argv) != 3:
        sys.exit("usage: python -m mts_sms.services.send_test_sms <msid> <text>")
    service = get_sms_service()
    if not isinstance(service, MtsSmsProvider):
        sys.exit("MTS_API_TOKEN is not set; nothing sent.")
    msg = service.send(sys.argv[1], sys.argv[2], meta={"naming": "test"})
    print(f"Test SMS submitted: message_id={msg.message_id} send_error={msg.send_error}")
    if msg.message_id:
        st = get_sms_status(msg.message_id, service.token)
        print(f"Status: {st.status} cost={st.cost}")
