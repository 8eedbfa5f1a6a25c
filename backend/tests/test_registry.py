from lowcard.services.table import PlayerRegistry, normalize_name


def test_normalize_name():
    assert normalize_name('  Alice  ') == 'Alice'
    assert normalize_name('') == 'Guest'
    assert normalize_name(None) == 'Guest'
    assert normalize_name('   ') == 'Guest'
    assert normalize_name('x' * 40) == 'x' * 24
    assert normalize_name(42) == '42'


def test_register_returns_stored_name_and_is_alive():
    reg = PlayerRegistry()
    assert reg.register('s1', ' Bob ') == 'Bob'
    assert reg.get('s1').alive is True
    assert 's1' in reg


def test_reregister_revives_and_keeps_position():
    reg = PlayerRegistry()
    reg.register('a', 'A')
    reg.register('b', 'B')
    reg.mark_alive('a', False)
    reg.register('a', 'Alpha')
    assert reg.public_view() == [
        {'name': 'Alpha', 'alive': True},
        {'name': 'B', 'alive': True},
    ]


def test_alive_ids_in_insertion_order():
    reg = PlayerRegistry()
    for sid in ('c', 'a', 'b'):
        reg.register(sid, sid.upper())
    reg.mark_alive('a', False)
    assert reg.alive_ids() == ['c', 'b']
    reg.revive_all()
    assert reg.alive_ids() == ['c', 'a', 'b']


def test_public_view_hides_identity():
    reg = PlayerRegistry()
    reg.register('secret-sid', 'Cara')
    view = reg.public_view()
    assert view == [{'name': 'Cara', 'alive': True}]
    assert 'secret-sid' not in str(view)


def test_remove():
    reg = PlayerRegistry()
    reg.register('a', 'A')
    assert reg.remove('a').name == 'A'
    assert reg.remove('a') is None
    assert len(reg) == 0
    # unknown identities are ignored
    reg.mark_alive('a', True)
    assert reg.alive_ids() == []


def test_normalize_name_drops_control_characters():
    assert normalize_name('Al\x00ice\n') == 'Alice'
    assert normalize_name('\t\x07') == 'Guest'
    assert normalize_name('\x1b' * 5 + 'y' * 30) == 'y' * 24
