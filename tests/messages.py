"""
Wire message test vectors shared across test modules.
"""

VALID_MESSAGES = [
    {
        "name": "seq 5",
        "raw": "seq=5;sender_rtn=021000021;sender_an=629385443170308;receiver_rtn=121145307;receiver_an=136657407199052;amount=6666",
        "expected": {
            "seq": 5,
            "sender_rtn": "021000021",
            "sender_an": "629385443170308",
            "receiver_rtn": "121145307",
            "receiver_an": "136657407199052",
            "amount": 6666,
        },
    },
    {
        "name": "seq 1",
        "raw": "seq=1;sender_rtn=021000021;sender_an=537646894897833;receiver_rtn=121145307;receiver_an=669907820975207;amount=3424",
        "expected": {
            "seq": 1,
            "sender_rtn": "021000021",
            "sender_an": "537646894897833",
            "receiver_rtn": "121145307",
            "receiver_an": "669907820975207",
            "amount": 3424,
        },
    },
    {
        "name": "seq 2",
        "raw": "seq=2;sender_rtn=121000248;sender_an=349848983426759;receiver_rtn=121145307;receiver_an=160661577716921;amount=2123",
        "expected": {
            "seq": 2,
            "sender_rtn": "121000248",
            "sender_an": "349848983426759",
            "receiver_rtn": "121145307",
            "receiver_an": "160661577716921",
            "amount": 2123,
        },
    },
    {
        "name": "seq 3",
        "raw": "seq=3;sender_rtn=121000248;sender_an=608884434554320;receiver_rtn=121145307;receiver_an=136657407199052;amount=2123",
        "expected": {
            "seq": 3,
            "sender_rtn": "121000248",
            "sender_an": "608884434554320",
            "receiver_rtn": "121145307",
            "receiver_an": "136657407199052",
            "amount": 2123,
        },
    },
    {
        "name": "seq 4",
        "raw": "seq=4;sender_rtn=021000021;sender_an=629385443170308;receiver_rtn=121145307;receiver_an=136657407199052;amount=1034",
        "expected": {
            "seq": 4,
            "sender_rtn": "021000021",
            "sender_an": "629385443170308",
            "receiver_rtn": "121145307",
            "receiver_an": "136657407199052",
            "amount": 1034,
        },
    },
]

INVALID_MESSAGES = [
    ("empty message", "", "invalid message format: must contain all information"),
    (
        "invalid seq",
        "seq=hello world;sender_rtn=1234;sender_an=12345678;receiver_rtn=987654321;receiver_an=87654321;amount=1000",
        "invalid SEQ format: must be numeric",
    ),
    (
        "sender rtn too long",
        "seq=6;sender_rtn=0021000021;sender_an=12345678;receiver_rtn=121145307;receiver_an=87654321;amount=1000",
        "invalid RTN format: must be exactly 9 digits",
    ),
    (
        "sender rtn not numeric",
        "seq=7;sender_rtn=hello world;sender_an=12345678;receiver_rtn=121145307;receiver_an=87654321;amount=1000",
        "invalid RTN format: must be exactly 9 digits",
    ),
    (
        "receiver rtn too short",
        "seq=8;sender_rtn=021000021;sender_an=12345678;receiver_rtn=21145307;receiver_an=87654321;amount=1000",
        "invalid RTN format: must be exactly 9 digits",
    ),
    (
        "receiver rtn not numeric",
        "seq=9;sender_rtn=021000021;sender_an=12345678;receiver_rtn=hello world;receiver_an=87654321;amount=1000",
        "invalid RTN format: must be exactly 9 digits",
    ),
    (
        "rtn error masks negative amount",
        "seq=10;sender_rtn=021000021;sender_an=12345678;receiver_rtn=hello world;receiver_an=87654321;amount=-5",
        "invalid RTN format: must be exactly 9 digits",
    ),
    (
        "amount not numeric",
        "seq=11;sender_rtn=021000021;sender_an=629385443170308;receiver_rtn=121145307;receiver_an=136657407199052;amount=hello world",
        "invalid amount format: must be numeric",
    ),
    (
        "account number not numeric",
        "seq=12;sender_rtn=021000021;sender_an=62938x;receiver_rtn=121145307;receiver_an=136657407199052;amount=10",
        "invalid AN format: must be numeric",
    ),
]
