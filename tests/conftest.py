import pytest


@pytest.fixture
def original_line():
    return '{"status":"pending","uuid":"abc","entry":"20240101T000000Z"}'


@pytest.fixture
def modified_line():
    return (
        '{"status":"completed","uuid":"abc","entry":"20240101T000000Z",'
        '"modified":"20240102T120000Z"}'
    )


@pytest.fixture
def full_line():
    """A task with every supported field set."""
    return (
        '{"id":7,"description":"Write report","due":"20240315T170000Z",'
        '"entry":"20240301T090000Z","imask":2.0,"modified":"20240302T101530Z",'
        '"parent":"p-1","project":"work","recur":"weekly",'
        '"reviewed":"20240303T000000Z","rtype":"periodic","status":"pending",'
        '"until":"20241231T235959Z","uuid":"u-1","wait":"20240310T080000Z",'
        '"annotations":[{"entry":"20240301T091500Z","description":"started"}],'
        '"tags":["a","b"],"urgency":8.5}'
    )
