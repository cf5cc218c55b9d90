"""Tag mnemonics for FIX 4.1."""

ACCOUNT = 1
ADV_ID = 2
ADV_REF_ID = 3
ADV_SIDE = 4
ADV_TRANS_TYPE = 5
AVG_PX = 6
BEGIN_SEQ_NO = 7
BEGIN_STRING = 8
BODY_LENGTH = 9
CHECK_SUM = 10
CL_ORD_ID = 11
COMMISSION = 12
COMM_TYPE = 13
CUM_QTY = 14
CURRENCY = 15
END_SEQ_NO = 16
EXEC_ID = 17
EXEC_INST = 18
EXEC_REF_ID = 19
EXEC_TRANS_TYPE = 20
HANDL_INST = 21
ID_SOURCE = 22
IO_IID = 23
IOI_OTH_SVC = 24
IOI_QLTY_IND = 25
IOI_REF_ID = 26
IOI_SHARES = 27
IOI_TRANS_TYPE = 28
LAST_CAPACITY = 29
LAST_MKT = 30
LAST_PX = 31
LAST_SHARES = 32
LINES_OF_TEXT = 33
MSG_SEQ_NUM = 34
MSG_TYPE = 35
NEW_SEQ_NO = 36
ORDER_ID = 37
ORDER_QTY = 38
ORD_STATUS = 39
ORD_TYPE = 40
ORIG_CL_ORD_ID = 41
ORIG_TIME = 42
POSS_DUP_FLAG = 43
PRICE = 44
REF_SEQ_NUM = 45
RELATD_SYM = 46
RULE_80A = 47
SECURITY_ID = 48
SENDER_COMP_ID = 49
SENDER_SUB_ID = 50
SENDING_TIME = 52
SHARES = 53
SIDE = 54
SYMBOL = 55
TARGET_COMP_ID = 56
TARGET_SUB_ID = 57
TEXT = 58
TIME_IN_FORCE = 59
TRANSACT_TIME = 60
URGENCY = 61
VALID_UNTIL_TIME = 62
SETTLMNT_TYP = 63
FUT_SETT_DATE = 64
SYMBOL_SFX = 65
LIST_ID = 66
LIST_SEQ_NO = 67
LIST_NO_ORDS = 68
LIST_EXEC_INST = 69
ALLOC_ID = 70
ALLOC_TRANS_TYPE = 71
REF_ALLOC_ID = 72
NO_ORDERS = 73
AVG_PRX_PRECISION = 74
TRADE_DATE = 75
EXEC_BROKER = 76
OPEN_CLOSE = 77
NO_ALLOCS = 78
ALLOC_ACCOUNT = 79
ALLOC_SHARES = 80
PROCESS_CODE = 81
NO_RPTS = 82
RPT_SEQ = 83
CXL_QTY = 84
ALLOC_STATUS = 87
ALLOC_REJ_CODE = 88
SIGNATURE = 89
SECURE_DATA_LEN = 90
SECURE_DATA = 91
BROKER_OF_CREDIT = 92
SIGNATURE_LENGTH = 93
EMAIL_TYPE = 94
RAW_DATA_LENGTH = 95
RAW_DATA = 96
POSS_RESEND = 97
ENCRYPT_METHOD = 98
STOP_PX = 99
EX_DESTINATION = 100
CXL_REJ_REASON = 102
ORD_REJ_REASON = 103
IOI_QUALIFIER = 104
WAVE_NO = 105
ISSUER = 106
SECURITY_DESC = 107
HEART_BT_INT = 108
CLIENT_ID = 109
MIN_QTY = 110
MAX_FLOOR = 111
TEST_REQ_ID = 112
REPORT_TO_EXCH = 113
LOCATE_REQD = 114
ON_BEHALF_OF_COMP_ID = 115
ON_BEHALF_OF_SUB_ID = 116
QUOTE_ID = 117
NET_MONEY = 118
SETTL_CURR_AMT = 119
SETTL_CURRENCY = 120
FOREX_REQ = 121
ORIG_SENDING_TIME = 122
GAP_FILL_FLAG = 123
NO_EXECS = 124
EXPIRE_TIME = 126
DK_REASON = 127
DELIVER_TO_COMP_ID = 128
DELIVER_TO_SUB_ID = 129
IOI_NATURAL_FLAG = 130
QUOTE_REQ_ID = 131
BID_PX = 132
OFFER_PX = 133
BID_SIZE = 134
OFFER_SIZE = 135
NO_MISC_FEES = 136
MISC_FEE_AMT = 137
MISC_FEE_CURR = 138
MISC_FEE_TYPE = 139
PREV_CLOSE_PX = 140
RESET_SEQ_NUM_FLAG = 141
SENDER_LOCATION_ID = 142
TARGET_LOCATION_ID = 143
ON_BEHALF_OF_LOCATION_ID = 144
DELIVER_TO_LOCATION_ID = 145
NO_RELATED_SYM = 146
SUBJECT = 147
HEADLINE = 148
URL_LINK = 149
EXEC_TYPE = 150
LEAVES_QTY = 151
CASH_ORDER_QTY = 152
ALLOC_AVG_PX = 153
ALLOC_NET_MONEY = 154
SETTL_CURR_FX_RATE = 155
SETTL_CURR_FX_RATE_CALC = 156
NUM_DAYS_INTEREST = 157
ACCRUED_INTEREST_RATE = 158
ACCRUED_INTEREST_AMT = 159
SETTL_INST_MODE = 160
ALLOC_TEXT = 161
SETTL_INST_ID = 162
SETTL_INST_TRANS_TYPE = 163
EMAIL_THREAD_ID = 164
SETTL_INST_SOURCE = 165
SETTL_LOCATION = 166
SECURITY_TYPE = 167
EFFECTIVE_TIME = 168
STAND_INST_DB_TYPE = 169
STAND_INST_DB_NAME = 170
STAND_INST_DB_ID = 171
SETTL_DELIVERY_TYPE = 172
SETTL_DEPOSITORY_CODE = 173
SETTL_BRKR_CODE = 174
SETTL_INST_CODE = 175
SECURITY_SETTL_AGENT_NAME = 176
SECURITY_SETTL_AGENT_CODE = 177
SECURITY_SETTL_AGENT_ACCT_NUM = 178
SECURITY_SETTL_AGENT_ACCT_NAME = 179
SECURITY_SETTL_AGENT_CONTACT_NAME = 180
SECURITY_SETTL_AGENT_CONTACT_PHONE = 181
CASH_SETTL_AGENT_NAME = 182
CASH_SETTL_AGENT_CODE = 183
CASH_SETTL_AGENT_ACCT_NUM = 184
CASH_SETTL_AGENT_ACCT_NAME = 185
CASH_SETTL_AGENT_CONTACT_NAME = 186
CASH_SETTL_AGENT_CONTACT_PHONE = 187
BID_SPOT_RATE = 188
BID_FORWARD_POINTS = 189
OFFER_SPOT_RATE = 190
OFFER_FORWARD_POINTS = 191
ORDER_QTY_2 = 192
FUT_SETT_DATE_2 = 193
LAST_SPOT_RATE = 194
LAST_FORWARD_POINTS = 195
ALLOC_LINK_ID = 196
ALLOC_LINK_TYPE = 197
SECONDARY_ORDER_ID = 198
NO_IOI_QUALIFIERS = 199
MATURITY_MONTH_YEAR = 200
PUT_OR_CALL = 201
STRIKE_PRICE = 202
COVERED_OR_UNCOVERED = 203
CUSTOMER_OR_FIRM = 204
MATURITY_DAY = 205
OPT_ATTRIBUTE = 206
SECURITY_EXCHANGE = 207
NOTIFY_BROKER_OF_CREDIT = 208
ALLOC_HANDL_INST = 209
MAX_SHOW = 210
PEG_DIFFERENCE = 211