"""Oracle Forms trigger event catalogue.

Each known trigger name maps to a description of when it fires, what the
handler is typically used for and where equivalent logic lives in a Maximo
Java customization.
"""

from typing import Dict, Tuple

from ..models.triggers import TriggerEventInfo

# name -> (description, java use, maximo location)
TRIGGER_EVENTS: Dict[str, Tuple[str, str, str]] = {
    'WHEN-NEW-FORM-INSTANCE': (
        'Fires when a new form instance is created',
        'Form initialization, e.g. setting default values',
        'AppBean.initialize() or DataBean.initialize() - application/block initialization',
    ),
    'WHEN-NEW-ITEM-INSTANCE': (
        'Fires when an item receives focus',
        'Focus handling such as data checks',
        'AppBean custom method - front-end event, usually not converted',
    ),
    'WHEN-BUTTON-PRESSED': (
        'Fires when a button is pressed',
        'Button click handling, submitting data or running an action',
        'AppBean.EVENTNAME() - button event method named after the sigevent',
    ),
    'WHEN-VALIDATE-ITEM': (
        'Fires when an item is validated',
        'Field check or processing before submit',
        'Mbo.validateField(String attrName) or FldClass.validate() - single field validation',
    ),
    'WHEN-NEW-RECORD-INSTANCE': (
        'Fires when the form enters a new record',
        'Data initialization for a new record',
        'Mbo.add() or Mbo.init() - new record initialization',
    ),
    'PRE-QUERY': (
        'Fires before a query',
        'Filtering or preparing data before the query is sent',
        'MboSet.setWhere() or an overridden AppBean query method',
    ),
    'POST-QUERY': (
        'Fires after a query',
        'Post-processing of fetched rows',
        'MboSet.fetchMbos() or Mbo.init() - post-query processing',
    ),
    'PRE-INSERT': (
        'Fires before an insert',
        'Preparation before data is inserted',
        'Mbo.add() - initialize field defaults before insert',
    ),
    'POST-INSERT': (
        'Fires after an insert',
        'Follow-up work after data is inserted',
        'Inside Mbo.save() or after MboSet.save() - post-insert processing',
    ),
    'PRE-UPDATE': (
        'Fires before an update',
        'Checks or preparation before data is updated',
        'Mbo.modify() - pre-update check',
    ),
    'POST-UPDATE': (
        'Fires after an update',
        'Follow-up work after data is updated',
        'Inside Mbo.save() - post-update processing',
    ),
    'PRE-DELETE': (
        'Fires before a delete',
        'Checks or processing before data is deleted',
        'Mbo.delete() or Mbo.canDelete() - pre-delete check',
    ),
    'POST-DELETE': (
        'Fires after a delete',
        'Follow-up work after data is deleted',
        'Inside Mbo.delete() or after MboSet.save() - post-delete processing',
    ),
    'WHEN-TIMER-EXPIRED': (
        'Fires when a timer expires',
        'Scheduled handling after a timer completes',
        'Crontask or Escalation - scheduled task',
    ),
    'WHEN-VALIDATE-RECORD': (
        'Fires when a whole record is validated',
        'Final validation before the record is submitted',
        'Mbo.appValidate() - whole record validation before save',
    ),
    'PRE-FORM': (
        'Fires before the form is created',
        'Data initialization and form property setup',
        'AppBean.initialize() - before application initialization',
    ),
    'POST-FORM': (
        'Fires after the form is created',
        'Post-processing once data is loaded',
        'End of AppBean.initialize() - form load complete',
    ),
    'WHEN-LOV-IS-OPEN': (
        'Fires when a LOV opens',
        'LOV popup handling',
        'FldClass or lookupfilter - domain/lookup filtering',
    ),
    'WHEN-LOV-IS-CLOSED': (
        'Fires when a LOV closes',
        'Follow-up after a LOV selection',
        'Mbo.action() or FldClass.action() - after LOV selection',
    ),
    'WHEN-NEW-BLOCK-INSTANCE': (
        'Fires when a new block instance is created',
        'Block data initialization',
        'DataBean.initialize() - child block/table initialization',
    ),
    'WHEN-MOUSE-CLICKED': (
        'Fires on a mouse click',
        'User click handling',
        'Front-end JavaScript or AppBean method - usually not converted',
    ),
    'WHEN-MOUSE-DOUBLE-CLICKED': (
        'Fires on a mouse double click',
        'User double click handling',
        'Front-end JavaScript or AppBean method - usually not converted',
    ),
    'WHEN-KEY-PRESSED': (
        'Fires when a key is pressed',
        'Key press handling',
        'Front-end JavaScript - usually not converted',
    ),
    'WHEN-KEY-RELEASED': (
        'Fires when a key is released',
        'Handling after a key is released',
        'Front-end JavaScript - usually not converted',
    ),
    'PRE-COMMIT': (
        'Fires before data is committed',
        'Final validation before commit',
        'Mbo.appValidate() - final validation before save',
    ),
    'POST-COMMIT': (
        'Fires after data is committed',
        'Follow-up work after commit',
        'End of Mbo.save() or EventAction - post-save processing',
    ),
    'WHEN-NEW-NAVIGATION-INSTANCE': (
        'Fires when a new navigation instance is created',
        'Refreshing the navigation view',
        'AppBean navigation method - tab switch handling',
    ),
    'WHEN-MOUSE-ENTERED': (
        'Fires when the mouse enters an area',
        'Mouse enter handling',
        'Front-end CSS/JavaScript - not converted',
    ),
    'WHEN-MOUSE-EXITED': (
        'Fires when the mouse leaves an area',
        'Mouse leave handling',
        'Front-end CSS/JavaScript - not converted',
    ),
    'ON-ERROR': (
        'Fires when an error occurs',
        'Centralized error handling',
        'MXException or MboSetInfo - error message setup',
    ),
    'ON-MESSAGE': (
        'Fires when a message is issued',
        'Custom message handling',
        'MXException or messages.xml - message definitions',
    ),
    'KEY-COMMIT': (
        'Fires when the commit key is pressed',
        'Commit action handling',
        'Toolbar SAVE button - default behavior, not converted',
    ),
    'KEY-EXIT': (
        'Fires when the exit key is pressed',
        'Exit action handling',
        'Front-end navigation - not converted',
    ),
    'KEY-DELREC': (
        'Fires when the delete record key is pressed',
        'Delete record handling',
        'Mbo.delete() + Mbo.canDelete()',
    ),
    'KEY-ENTQRY': (
        'Fires when the enter query key is pressed',
        'Enter query mode handling',
        'Front-end List tab or filter - not converted',
    ),
    'KEY-EXEQRY': (
        'Fires when the execute query key is pressed',
        'Execute query handling',
        'MboSet.setWhere() - query condition setup',
    ),
    'KEY-NXTREC': (
        'Fires when the next record key is pressed',
        'Move to the next record',
        'Front-end navigation - not converted',
    ),
    'KEY-PRVREC': (
        'Fires when the previous record key is pressed',
        'Move to the previous record',
        'Front-end navigation - not converted',
    ),
    'KEY-CREREC': (
        'Fires when the create record key is pressed',
        'Create record handling',
        'Mbo.add() + Mbo.init()',
    ),
    'KEY-CLRFRM': (
        'Fires when the clear form key is pressed',
        'Clear form handling',
        'Front-end Clear button - not converted',
    ),
}

UNKNOWN_EVENT_JAVA_USE = 'Custom logic handling'
UNKNOWN_EVENT_MAXIMO_LOCATION = 'Choose the appropriate Mbo/AppBean method based on the business logic'


def is_known_event(trigger_name: str) -> bool:
    return trigger_name.upper() in TRIGGER_EVENTS


def get_trigger_event_info(trigger_name: str) -> TriggerEventInfo:
    """Look up an event by trigger name, case-insensitively.

    Unknown names get a generic entry built from the upper-cased name.

    Examples:
        >>> get_trigger_event_info('pre-delete').maximo_location
        'Mbo.delete() or Mbo.canDelete() - pre-delete check'
    """
    name = trigger_name.upper()
    known = TRIGGER_EVENTS.get(name)
    if known is None:
        return TriggerEventInfo(
            description=f'{name} trigger',
            java_use=UNKNOWN_EVENT_JAVA_USE,
            maximo_location=UNKNOWN_EVENT_MAXIMO_LOCATION,
        )
    description, java_use, maximo_location = known
    return TriggerEventInfo(description=description, java_use=java_use, maximo_location=maximo_location)
