# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum

# Member names follow the W3C UI Events vocabularies, as reported by the windowing
# layer: KeyboardEvent.code for physical keys and KeyboardEvent.key for logical keys.
# The windowing layer deviates from the W3C names in one place: the OS keys are
# SuperLeft/SuperRight rather than MetaLeft/MetaRight.


class _NameValued(enum.Enum):
    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return name


# A physical key position, independent of keyboard layout. The value for a key
# labelled "A" on a US layout is KeyA no matter which character it produces.
@enum.unique
class KeyCode(_NameValued):
    # Reported when the platform could not map the scancode to any known position.
    Unidentified = enum.auto()

    # Writing system keys
    Backquote = enum.auto()
    Backslash = enum.auto()
    BracketLeft = enum.auto()
    BracketRight = enum.auto()
    Comma = enum.auto()
    Digit0 = enum.auto()
    Digit1 = enum.auto()
    Digit2 = enum.auto()
    Digit3 = enum.auto()
    Digit4 = enum.auto()
    Digit5 = enum.auto()
    Digit6 = enum.auto()
    Digit7 = enum.auto()
    Digit8 = enum.auto()
    Digit9 = enum.auto()
    Equal = enum.auto()
    # The extra key between left shift and Z on ISO layouts.
    IntlBackslash = enum.auto()
    IntlRo = enum.auto()
    IntlYen = enum.auto()
    KeyA = enum.auto()
    KeyB = enum.auto()
    KeyC = enum.auto()
    KeyD = enum.auto()
    KeyE = enum.auto()
    KeyF = enum.auto()
    KeyG = enum.auto()
    KeyH = enum.auto()
    KeyI = enum.auto()
    KeyJ = enum.auto()
    KeyK = enum.auto()
    KeyL = enum.auto()
    KeyM = enum.auto()
    KeyN = enum.auto()
    KeyO = enum.auto()
    KeyP = enum.auto()
    KeyQ = enum.auto()
    KeyR = enum.auto()
    KeyS = enum.auto()
    KeyT = enum.auto()
    KeyU = enum.auto()
    KeyV = enum.auto()
    KeyW = enum.auto()
    KeyX = enum.auto()
    KeyY = enum.auto()
    KeyZ = enum.auto()
    Minus = enum.auto()
    Period = enum.auto()
    Quote = enum.auto()
    Semicolon = enum.auto()
    Slash = enum.auto()

    # Functional keys
    AltLeft = enum.auto()
    AltRight = enum.auto()
    Backspace = enum.auto()
    CapsLock = enum.auto()
    ContextMenu = enum.auto()
    ControlLeft = enum.auto()
    ControlRight = enum.auto()
    Enter = enum.auto()
    SuperLeft = enum.auto()
    SuperRight = enum.auto()
    ShiftLeft = enum.auto()
    ShiftRight = enum.auto()
    Space = enum.auto()
    Tab = enum.auto()
    Convert = enum.auto()
    KanaMode = enum.auto()
    Lang1 = enum.auto()
    Lang2 = enum.auto()
    Lang3 = enum.auto()
    Lang4 = enum.auto()
    Lang5 = enum.auto()
    NonConvert = enum.auto()

    # Control pad
    Delete = enum.auto()
    End = enum.auto()
    Help = enum.auto()
    Home = enum.auto()
    Insert = enum.auto()
    PageDown = enum.auto()
    PageUp = enum.auto()

    # Arrow pad
    ArrowDown = enum.auto()
    ArrowLeft = enum.auto()
    ArrowRight = enum.auto()
    ArrowUp = enum.auto()

    # Numpad
    NumLock = enum.auto()
    Numpad0 = enum.auto()
    Numpad1 = enum.auto()
    Numpad2 = enum.auto()
    Numpad3 = enum.auto()
    Numpad4 = enum.auto()
    Numpad5 = enum.auto()
    Numpad6 = enum.auto()
    Numpad7 = enum.auto()
    Numpad8 = enum.auto()
    Numpad9 = enum.auto()
    NumpadAdd = enum.auto()
    NumpadBackspace = enum.auto()
    NumpadClear = enum.auto()
    NumpadClearEntry = enum.auto()
    NumpadComma = enum.auto()
    NumpadDecimal = enum.auto()
    NumpadDivide = enum.auto()
    NumpadEnter = enum.auto()
    NumpadEqual = enum.auto()
    NumpadHash = enum.auto()
    NumpadMemoryAdd = enum.auto()
    NumpadMemoryClear = enum.auto()
    NumpadMemoryRecall = enum.auto()
    NumpadMemoryStore = enum.auto()
    NumpadMemorySubtract = enum.auto()
    NumpadMultiply = enum.auto()
    NumpadParenLeft = enum.auto()
    NumpadParenRight = enum.auto()
    NumpadStar = enum.auto()
    NumpadSubtract = enum.auto()

    # Function section
    Escape = enum.auto()
    # Also the stand-in for keys which have no physical position of their own.
    Fn = enum.auto()
    FnLock = enum.auto()
    PrintScreen = enum.auto()
    ScrollLock = enum.auto()
    Pause = enum.auto()

    # Media keys
    BrowserBack = enum.auto()
    BrowserFavorites = enum.auto()
    BrowserForward = enum.auto()
    BrowserHome = enum.auto()
    BrowserRefresh = enum.auto()
    BrowserSearch = enum.auto()
    BrowserStop = enum.auto()
    Eject = enum.auto()
    LaunchApp1 = enum.auto()
    LaunchApp2 = enum.auto()
    LaunchMail = enum.auto()
    MediaPlayPause = enum.auto()
    MediaSelect = enum.auto()
    MediaStop = enum.auto()
    MediaTrackNext = enum.auto()
    MediaTrackPrevious = enum.auto()
    Power = enum.auto()
    Sleep = enum.auto()
    AudioVolumeDown = enum.auto()
    AudioVolumeMute = enum.auto()
    AudioVolumeUp = enum.auto()
    WakeUp = enum.auto()

    # Legacy and non-standard keys
    Meta = enum.auto()
    Hyper = enum.auto()
    Turbo = enum.auto()
    Abort = enum.auto()
    Resume = enum.auto()
    Suspend = enum.auto()
    Again = enum.auto()
    Copy = enum.auto()
    Cut = enum.auto()
    Find = enum.auto()
    Open = enum.auto()
    Paste = enum.auto()
    Props = enum.auto()
    Select = enum.auto()
    Undo = enum.auto()
    Hiragana = enum.auto()
    Katakana = enum.auto()

    F1 = enum.auto()
    F2 = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    F6 = enum.auto()
    F7 = enum.auto()
    F8 = enum.auto()
    F9 = enum.auto()
    F10 = enum.auto()
    F11 = enum.auto()
    F12 = enum.auto()
    F13 = enum.auto()
    F14 = enum.auto()
    F15 = enum.auto()
    F16 = enum.auto()
    F17 = enum.auto()
    F18 = enum.auto()
    F19 = enum.auto()
    F20 = enum.auto()
    F21 = enum.auto()
    F22 = enum.auto()
    F23 = enum.auto()
    F24 = enum.auto()
    F25 = enum.auto()
    F26 = enum.auto()
    F27 = enum.auto()
    F28 = enum.auto()
    F29 = enum.auto()
    F30 = enum.auto()
    F31 = enum.auto()
    F32 = enum.auto()
    F33 = enum.auto()
    F34 = enum.auto()
    F35 = enum.auto()

    # Codes some platforms report for laptop and multimedia keyboards; nothing
    # gives these a display name.
    BrightnessDown = enum.auto()
    BrightnessUp = enum.auto()
    DisplayToggleIntExt = enum.auto()
    KeyboardLayoutSelect = enum.auto()
    LaunchAssistant = enum.auto()
    LaunchControlPanel = enum.auto()
    LaunchScreenSaver = enum.auto()
    MailForward = enum.auto()
    MailReply = enum.auto()
    MailSend = enum.auto()
    MediaFastForward = enum.auto()
    MediaPause = enum.auto()
    MediaPlay = enum.auto()
    MediaRecord = enum.auto()
    MediaRewind = enum.auto()
    MicrophoneMuteToggle = enum.auto()
    PrivacyScreenToggle = enum.auto()
    SelectTask = enum.auto()
    ShowAllWindows = enum.auto()
    ZoomToggle = enum.auto()


# The meaning of a non-character key, independent of where it sits on the keyboard.
# Characters, dead keys and unidentified keys are carried by the structs in
# inputtypes instead.
@enum.unique
class NamedKey(_NameValued):
    # Modifiers
    Alt = enum.auto()
    AltGraph = enum.auto()
    CapsLock = enum.auto()
    Control = enum.auto()
    Fn = enum.auto()
    FnLock = enum.auto()
    Meta = enum.auto()
    NumLock = enum.auto()
    ScrollLock = enum.auto()
    Shift = enum.auto()
    Symbol = enum.auto()
    SymbolLock = enum.auto()
    Hyper = enum.auto()
    Super = enum.auto()

    # Whitespace
    Enter = enum.auto()
    Tab = enum.auto()

    # Navigation
    ArrowDown = enum.auto()
    ArrowLeft = enum.auto()
    ArrowRight = enum.auto()
    ArrowUp = enum.auto()
    End = enum.auto()
    Home = enum.auto()
    PageDown = enum.auto()
    PageUp = enum.auto()

    # Editing
    Backspace = enum.auto()
    Clear = enum.auto()
    Copy = enum.auto()
    CrSel = enum.auto()
    Cut = enum.auto()
    Delete = enum.auto()
    EraseEof = enum.auto()
    ExSel = enum.auto()
    Insert = enum.auto()
    Paste = enum.auto()
    Redo = enum.auto()
    Undo = enum.auto()

    # UI
    Accept = enum.auto()
    Again = enum.auto()
    Attn = enum.auto()
    Cancel = enum.auto()
    ContextMenu = enum.auto()
    Escape = enum.auto()
    Execute = enum.auto()
    Find = enum.auto()
    Help = enum.auto()
    Pause = enum.auto()
    Play = enum.auto()
    Props = enum.auto()
    Select = enum.auto()
    ZoomIn = enum.auto()
    ZoomOut = enum.auto()

    # Device
    BrightnessDown = enum.auto()
    BrightnessUp = enum.auto()
    Eject = enum.auto()
    LogOff = enum.auto()
    Power = enum.auto()
    PowerOff = enum.auto()
    PrintScreen = enum.auto()
    Hibernate = enum.auto()
    Standby = enum.auto()
    WakeUp = enum.auto()

    # IME and composition
    AllCandidates = enum.auto()
    Alphanumeric = enum.auto()
    CodeInput = enum.auto()
    Compose = enum.auto()
    Convert = enum.auto()
    FinalMode = enum.auto()
    GroupFirst = enum.auto()
    GroupLast = enum.auto()
    GroupNext = enum.auto()
    GroupPrevious = enum.auto()
    ModeChange = enum.auto()
    NextCandidate = enum.auto()
    NonConvert = enum.auto()
    PreviousCandidate = enum.auto()
    Process = enum.auto()
    SingleCandidate = enum.auto()
    HangulMode = enum.auto()
    HanjaMode = enum.auto()
    JunjaMode = enum.auto()
    Eisu = enum.auto()
    Hankaku = enum.auto()
    Hiragana = enum.auto()
    HiraganaKatakana = enum.auto()
    KanaMode = enum.auto()
    KanjiMode = enum.auto()
    Katakana = enum.auto()
    Romaji = enum.auto()
    Zenkaku = enum.auto()
    ZenkakuHankaku = enum.auto()

    # General purpose function keys
    F1 = enum.auto()
    F2 = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    F6 = enum.auto()
    F7 = enum.auto()
    F8 = enum.auto()
    F9 = enum.auto()
    F10 = enum.auto()
    F11 = enum.auto()
    F12 = enum.auto()
    F13 = enum.auto()
    F14 = enum.auto()
    F15 = enum.auto()
    F16 = enum.auto()
    F17 = enum.auto()
    F18 = enum.auto()
    F19 = enum.auto()
    F20 = enum.auto()
    F21 = enum.auto()
    F22 = enum.auto()
    F23 = enum.auto()
    F24 = enum.auto()
    F25 = enum.auto()
    F26 = enum.auto()
    F27 = enum.auto()
    F28 = enum.auto()
    F29 = enum.auto()
    F30 = enum.auto()
    F31 = enum.auto()
    F32 = enum.auto()
    F33 = enum.auto()
    F34 = enum.auto()
    F35 = enum.auto()
    Soft1 = enum.auto()
    Soft2 = enum.auto()
    Soft3 = enum.auto()
    Soft4 = enum.auto()

    # Multimedia
    ChannelDown = enum.auto()
    ChannelUp = enum.auto()
    Close = enum.auto()
    MailForward = enum.auto()
    MailReply = enum.auto()
    MailSend = enum.auto()
    MediaClose = enum.auto()
    MediaFastForward = enum.auto()
    MediaPause = enum.auto()
    MediaPlay = enum.auto()
    MediaPlayPause = enum.auto()
    MediaRecord = enum.auto()
    MediaRewind = enum.auto()
    MediaStop = enum.auto()
    MediaTrackNext = enum.auto()
    MediaTrackPrevious = enum.auto()
    New = enum.auto()
    Open = enum.auto()
    Print = enum.auto()
    Save = enum.auto()
    SpellCheck = enum.auto()
    Key11 = enum.auto()
    Key12 = enum.auto()

    # Audio
    AudioBalanceLeft = enum.auto()
    AudioBalanceRight = enum.auto()
    AudioBassBoostDown = enum.auto()
    AudioBassBoostToggle = enum.auto()
    AudioBassBoostUp = enum.auto()
    AudioFaderFront = enum.auto()
    AudioFaderRear = enum.auto()
    AudioSurroundModeNext = enum.auto()
    AudioTrebleDown = enum.auto()
    AudioTrebleUp = enum.auto()
    AudioVolumeDown = enum.auto()
    AudioVolumeUp = enum.auto()
    AudioVolumeMute = enum.auto()
    MicrophoneToggle = enum.auto()
    MicrophoneVolumeDown = enum.auto()
    MicrophoneVolumeUp = enum.auto()
    MicrophoneVolumeMute = enum.auto()

    # Speech
    SpeechCorrectionList = enum.auto()
    SpeechInputToggle = enum.auto()

    # Application launchers
    LaunchApplication1 = enum.auto()
    LaunchApplication2 = enum.auto()
    LaunchCalendar = enum.auto()
    LaunchContacts = enum.auto()
    LaunchMail = enum.auto()
    LaunchMediaPlayer = enum.auto()
    LaunchMusicPlayer = enum.auto()
    LaunchPhone = enum.auto()
    LaunchScreenSaver = enum.auto()
    LaunchSpreadsheet = enum.auto()
    LaunchWebBrowser = enum.auto()
    LaunchWebCam = enum.auto()
    LaunchWordProcessor = enum.auto()

    # Browser
    BrowserBack = enum.auto()
    BrowserFavorites = enum.auto()
    BrowserForward = enum.auto()
    BrowserHome = enum.auto()
    BrowserRefresh = enum.auto()
    BrowserSearch = enum.auto()
    BrowserStop = enum.auto()

    # Mobile phone
    AppSwitch = enum.auto()
    Call = enum.auto()
    Camera = enum.auto()
    CameraFocus = enum.auto()
    EndCall = enum.auto()
    GoBack = enum.auto()
    GoHome = enum.auto()
    HeadsetHook = enum.auto()
    LastNumberRedial = enum.auto()
    Notification = enum.auto()
    MannerMode = enum.auto()
    VoiceDial = enum.auto()

    # TV and remote control
    TV = enum.auto()
    TV3DMode = enum.auto()
    TVAntennaCable = enum.auto()
    TVAudioDescription = enum.auto()
    TVAudioDescriptionMixDown = enum.auto()
    TVAudioDescriptionMixUp = enum.auto()
    TVContentsMenu = enum.auto()
    TVDataService = enum.auto()
    TVInput = enum.auto()
    TVInputComponent1 = enum.auto()
    TVInputComponent2 = enum.auto()
    TVInputComposite1 = enum.auto()
    TVInputComposite2 = enum.auto()
    TVInputHDMI1 = enum.auto()
    TVInputHDMI2 = enum.auto()
    TVInputHDMI3 = enum.auto()
    TVInputHDMI4 = enum.auto()
    TVInputVGA1 = enum.auto()
    TVMediaContext = enum.auto()
    TVNetwork = enum.auto()
    TVNumberEntry = enum.auto()
    TVPower = enum.auto()
    TVRadioService = enum.auto()
    TVSatellite = enum.auto()
    TVSatelliteBS = enum.auto()
    TVSatelliteCS = enum.auto()
    TVSatelliteToggle = enum.auto()
    TVTerrestrialAnalog = enum.auto()
    TVTerrestrialDigital = enum.auto()
    TVTimer = enum.auto()
    AVRInput = enum.auto()
    AVRPower = enum.auto()
    ColorF0Red = enum.auto()
    ColorF1Green = enum.auto()
    ColorF2Yellow = enum.auto()
    ColorF3Blue = enum.auto()
    ColorF4Grey = enum.auto()
    ColorF5Brown = enum.auto()
    ClosedCaptionToggle = enum.auto()
    Dimmer = enum.auto()
    DisplaySwap = enum.auto()
    DVR = enum.auto()
    Exit = enum.auto()
    FavoriteClear0 = enum.auto()
    FavoriteClear1 = enum.auto()
    FavoriteClear2 = enum.auto()
    FavoriteClear3 = enum.auto()
    FavoriteRecall0 = enum.auto()
    FavoriteRecall1 = enum.auto()
    FavoriteRecall2 = enum.auto()
    FavoriteRecall3 = enum.auto()
    FavoriteStore0 = enum.auto()
    FavoriteStore1 = enum.auto()
    FavoriteStore2 = enum.auto()
    FavoriteStore3 = enum.auto()
    Guide = enum.auto()
    GuideNextDay = enum.auto()
    GuidePreviousDay = enum.auto()
    Info = enum.auto()
    InstantReplay = enum.auto()
    Link = enum.auto()
    ListProgram = enum.auto()
    LiveContent = enum.auto()
    Lock = enum.auto()
    MediaApps = enum.auto()
    MediaAudioTrack = enum.auto()
    MediaLast = enum.auto()
    MediaSkipBackward = enum.auto()
    MediaSkipForward = enum.auto()
    MediaStepBackward = enum.auto()
    MediaStepForward = enum.auto()
    MediaTopMenu = enum.auto()
    NavigateIn = enum.auto()
    NavigateNext = enum.auto()
    NavigateOut = enum.auto()
    NavigatePrevious = enum.auto()
    NextFavoriteChannel = enum.auto()
    NextUserProfile = enum.auto()
    OnDemand = enum.auto()
    Pairing = enum.auto()
    PinPDown = enum.auto()
    PinPMove = enum.auto()
    PinPToggle = enum.auto()
    PinPUp = enum.auto()
    PlaySpeedDown = enum.auto()
    PlaySpeedReset = enum.auto()
    PlaySpeedUp = enum.auto()
    RandomToggle = enum.auto()
    RcLowBattery = enum.auto()
    RecordSpeedNext = enum.auto()
    RfBypass = enum.auto()
    ScanChannelsToggle = enum.auto()
    ScreenModeNext = enum.auto()
    Settings = enum.auto()
    SplitScreenToggle = enum.auto()
    STBInput = enum.auto()
    STBPower = enum.auto()
    Subtitle = enum.auto()
    Teletext = enum.auto()
    VideoModeNext = enum.auto()
    Wink = enum.auto()
    ZoomToggle = enum.auto()


# Values match the order the windowing layer declares its buttons in; a button's
# hash is its integer value.
class PointerButton(enum.IntEnum):
    NONE = 0
    PRIMARY = 1
    SECONDARY = 2
    AUXILIARY = 3
    X1 = 4
    X2 = 5
