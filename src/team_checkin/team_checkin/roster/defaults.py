"""Roster of the deployed teams, used when no ROSTER_FILE is configured."""

DEFAULT_ROSTER = {
    "张庆": ["张庆", "吴菊香", "赵辛培", "李耀泰", "李积如", "吴秋兰", "何绮君"],
    "杨畅": ["杨畅", "黄义贡", "蔡建宏", "王嘉欣", "邢京旭"],
    "李静": ["李静", "陈瑶瑶", "杨康乐", "陈海旭", "姚纯洁", "林森森"],
    "熊丽娜": ["熊丽娜", "阮渭琮", "罗智杰", "陈明君", "黄黎明"],
    "樊计青": ["樊计青", "李锦路", "刘嘉驹", "林友忠", "张磊", "郑凯峰"],
}
