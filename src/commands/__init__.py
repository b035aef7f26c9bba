# Backend command names

GET_ACCOUNTS = "get_accounts"
SAVE_ACCOUNT = "save_account"
DELETE_ACCOUNT = "delete_account"
UPDATE_LAST_LOGIN = "update_last_login"

GET_EMAIL_RECEIVER_STATUS = "get_email_receiver_status"
TEST_EMAIL_CONNECTION = "test_email_connection"
START_EMAIL_RECEIVER = "start_email_receiver"
STOP_EMAIL_RECEIVER = "stop_email_receiver"
GET_VERIFICATION_CODES = "get_verification_codes"
