"""Tag mnemonics for FIX 4.2."""

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
SENDING_DATE = 51
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
TOT_NO_ORDERS = 68
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
NO_DLVY_INST = 85
DLVY_INST = 86
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
CXL_TYPE = 125
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
XML_DATA_LEN = 212
XML_DATA = 213
SETTL_INST_REF_ID = 214
NO_ROUTING_I_DS = 215
ROUTING_TYPE = 216
ROUTING_ID = 217
SPREAD_TO_BENCHMARK = 218
BENCHMARK = 219
COUPON_RATE = 223
CONTRACT_MULTIPLIER = 231
MD_REQ_ID = 262
SUBSCRIPTION_REQUEST_TYPE = 263
MARKET_DEPTH = 264
MD_UPDATE_TYPE = 265
AGGREGATED_BOOK = 266
NO_MD_ENTRY_TYPES = 267
NO_MD_ENTRIES = 268
MD_ENTRY_TYPE = 269
MD_ENTRY_PX = 270
MD_ENTRY_SIZE = 271
MD_ENTRY_DATE = 272
MD_ENTRY_TIME = 273
TICK_DIRECTION = 274
MD_MKT = 275
QUOTE_CONDITION = 276
TRADE_CONDITION = 277
MD_ENTRY_ID = 278
MD_UPDATE_ACTION = 279
MD_ENTRY_REF_ID = 280
MD_REQ_REJ_REASON = 281
MD_ENTRY_ORIGINATOR = 282
LOCATION_ID = 283
DESK_ID = 284
DELETE_REASON = 285
OPEN_CLOSE_SETTLE_FLAG = 286
SELLER_DAYS = 287
MD_ENTRY_BUYER = 288
MD_ENTRY_SELLER = 289
MD_ENTRY_POSITION_NO = 290
FINANCIAL_STATUS = 291
CORPORATE_ACTION = 292
DEF_BID_SIZE = 293
DEF_OFFER_SIZE = 294
NO_QUOTE_ENTRIES = 295
NO_QUOTE_SETS = 296
QUOTE_ACK_STATUS = 297
QUOTE_CANCEL_TYPE = 298
QUOTE_ENTRY_ID = 299
QUOTE_REJECT_REASON = 300
QUOTE_RESPONSE_LEVEL = 301
QUOTE_SET_ID = 302
QUOTE_REQUEST_TYPE = 303
TOT_QUOTE_ENTRIES = 304
UNDERLYING_ID_SOURCE = 305
UNDERLYING_ISSUER = 306
UNDERLYING_SECURITY_DESC = 307
UNDERLYING_SECURITY_EXCHANGE = 308
UNDERLYING_SECURITY_ID = 309
UNDERLYING_SECURITY_TYPE = 310
UNDERLYING_SYMBOL = 311
UNDERLYING_SYMBOL_SFX = 312
UNDERLYING_MATURITY_MONTH_YEAR = 313
UNDERLYING_MATURITY_DAY = 314
UNDERLYING_PUT_OR_CALL = 315
UNDERLYING_STRIKE_PRICE = 316
UNDERLYING_OPT_ATTRIBUTE = 317
UNDERLYING_CURRENCY = 318
RATIO_QTY = 319
SECURITY_REQ_ID = 320
SECURITY_REQUEST_TYPE = 321
SECURITY_RESPONSE_ID = 322
SECURITY_RESPONSE_TYPE = 323
SECURITY_STATUS_REQ_ID = 324
UNSOLICITED_INDICATOR = 325
SECURITY_TRADING_STATUS = 326
HALT_REASON_CHAR = 327
IN_VIEW_OF_COMMON = 328
DUE_TO_RELATED = 329
BUY_VOLUME = 330
SELL_VOLUME = 331
HIGH_PX = 332
LOW_PX = 333
ADJUSTMENT = 334
TRAD_SES_REQ_ID = 335
TRADING_SESSION_ID = 336
CONTRA_TRADER = 337
TRAD_SES_METHOD = 338
TRAD_SES_MODE = 339
TRAD_SES_STATUS = 340
TRAD_SES_START_TIME = 341
TRAD_SES_OPEN_TIME = 342
TRAD_SES_PRE_CLOSE_TIME = 343
TRAD_SES_CLOSE_TIME = 344
TRAD_SES_END_TIME = 345
NUMBER_OF_ORDERS = 346
MESSAGE_ENCODING = 347
ENCODED_ISSUER_LEN = 348
ENCODED_ISSUER = 349
ENCODED_SECURITY_DESC_LEN = 350
ENCODED_SECURITY_DESC = 351
ENCODED_LIST_EXEC_INST_LEN = 352
ENCODED_LIST_EXEC_INST = 353
ENCODED_TEXT_LEN = 354
ENCODED_TEXT = 355
ENCODED_SUBJECT_LEN = 356
ENCODED_SUBJECT = 357
ENCODED_HEADLINE_LEN = 358
ENCODED_HEADLINE = 359
ENCODED_ALLOC_TEXT_LEN = 360
ENCODED_ALLOC_TEXT = 361
ENCODED_UNDERLYING_ISSUER_LEN = 362
ENCODED_UNDERLYING_ISSUER = 363
ENCODED_UNDERLYING_SECURITY_DESC_LEN = 364
ENCODED_UNDERLYING_SECURITY_DESC = 365
ALLOC_PRICE = 366
QUOTE_SET_VALID_UNTIL_TIME = 367
QUOTE_ENTRY_REJECT_REASON = 368
LAST_MSG_SEQ_NUM_PROCESSED = 369
ON_BEHALF_OF_SENDING_TIME = 370
REF_TAG_ID = 371
REF_MSG_TYPE = 372
SESSION_REJECT_REASON = 373
BID_REQUEST_TRANS_TYPE = 374
CONTRA_BROKER = 375
COMPLIANCE_ID = 376
SOLICITED_FLAG = 377
EXEC_RESTATEMENT_REASON = 378
BUSINESS_REJECT_REF_ID = 379
BUSINESS_REJECT_REASON = 380
GROSS_TRADE_AMT = 381
NO_CONTRA_BROKERS = 382
MAX_MESSAGE_SIZE = 383
NO_MSG_TYPES = 384
MSG_DIRECTION = 385
NO_TRADING_SESSIONS = 386
TOTAL_VOLUME_TRADED = 387
DISCRETION_INST = 388
DISCRETION_OFFSET = 389
BID_ID = 390
CLIENT_BID_ID = 391
LIST_NAME = 392
TOTAL_NUM_SECURITIES = 393
BID_TYPE = 394
NUM_TICKETS = 395
SIDE_VALUE_1 = 396
SIDE_VALUE_2 = 397
NO_BID_DESCRIPTORS = 398
BID_DESCRIPTOR_TYPE = 399
BID_DESCRIPTOR = 400
SIDE_VALUE_IND = 401
LIQUIDITY_PCT_LOW = 402
LIQUIDITY_PCT_HIGH = 403
LIQUIDITY_VALUE = 404
EFP_TRACKING_ERROR = 405
FAIR_VALUE = 406
OUTSIDE_INDEX_PCT = 407
VALUE_OF_FUTURES = 408
LIQUIDITY_IND_TYPE = 409
WT_AVERAGE_LIQUIDITY = 410
EXCHANGE_FOR_PHYSICAL = 411
OUT_MAIN_CNTRY_U_INDEX = 412
CROSS_PERCENT = 413
PROG_RPT_REQS = 414
PROG_PERIOD_INTERVAL = 415
INC_TAX_IND = 416
NUM_BIDDERS = 417
TRADE_TYPE = 418
BASIS_PX_TYPE = 419
NO_BID_COMPONENTS = 420
COUNTRY = 421
TOT_NO_STRIKES = 422
PRICE_TYPE = 423
DAY_ORDER_QTY = 424
DAY_CUM_QTY = 425
DAY_AVG_PX = 426
GT_BOOKING_INST = 427
NO_STRIKES = 428
LIST_STATUS_TYPE = 429
NET_GROSS_IND = 430
LIST_ORDER_STATUS = 431
EXPIRE_DATE = 432
LIST_EXEC_INST_TYPE = 433
CXL_REJ_RESPONSE_TO = 434
UNDERLYING_COUPON_RATE = 435
UNDERLYING_CONTRACT_MULTIPLIER = 436
CONTRA_TRADE_QTY = 437
CONTRA_TRADE_TIME = 438
CLEARING_FIRM = 439
CLEARING_ACCOUNT = 440
LIQUIDITY_NUM_SECURITIES = 441
MULTI_LEG_REPORTING_TYPE = 442
STRIKE_TIME = 443
LIST_STATUS_TEXT = 444
ENCODED_LIST_STATUS_TEXT_LEN = 445
ENCODED_LIST_STATUS_TEXT = 446