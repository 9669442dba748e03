"""
Built-in word list for mrdle.

Generated by mrdle-build-word-list. Words are concatenated without
separators; every word is DEFAULT_WORD_SIZE letters long.
"""

DEFAULT_WORD_SIZE = 5

DEFAULT_WORDS_BLOB = (
    "aboutaboveabuseactoracuteadaptadmitadoptadultafteragainagentagreeahead"
    "alarmalbumalertalienalignalikealiveallotallowalloyalonealongalteramber"
    "amendamongampleangelangerangleangryankleapartappleapplyaprilarenaargue"
    "arisearmoraromaarrayarrowasideassetaudioauditavoidawakeawardawareawful"
    "baconbadgebadlybakerbasicbasinbasisbatchbeachbeardbeastbeginbeingbelly"
    "belowbenchberrybirthblackbladeblameblandblankblastblazebleakblendbless"
    "blindblinkblockblondbloodbloomblownboardboastbonusboostboothboundbrain"
    "brakebrandbrassbravebreadbreakbreedbrickbridebriefbringbrinkbroadbroke"
    "brookbroombrownbrushbuddybuildbuiltbunchburstbuyercabincablecamelcanal"
    "candycanoecargocarrycatchcauseceasechainchairchalkchampchantchaoscharm"
    "chartchasecheapcheatcheckcheekcheerchesschestchiefchildchilichillchina"
    "choirchordchosechunkcidercigarciviccivilclaimclampclashclasscleanclear"
    "clerkclickcliffclimbclingclockcloseclothcloudclowncoachcoastcocoacolon"
    "colorcometcomiccoralcouchcoughcouldcountcourtcovercrackcraftcranecrash"
    "cratecrawlcrazycreamcreekcrestcrimecrispcrosscrowdcrowncrudecruelcrush"
    "crustcurvecycledailydairydaisydancedealtdeathdebutdecaydecoydelaydelta"
    "densedepthderbydiarydigitdinerdirtyditchdizzydodgedoingdonordoubtdough"
    "draftdraindramadrankdrawndreaddreamdressdrieddriftdrilldrinkdrivedrove"
    "drowneagereagleearlyeartheaseleateneightelbowelderelecteliteemptyenemy"
    "enjoyenterentryequalerroreruptessayeventeveryexactexileexistextrafable"
    "faintfairyfaithfalsefancyfatalfaultfeastfenceferryfetchfeverfiberfield"
    "fieryfifthfiftyfightfinalflameflashfleetfleshflintfloatflockfloodfloor"
    "flourfluidflutefocusforceforgeforthfortyforumfoundframefraudfreshfront"
    "frostfruitfullyfunnygaugeghostgiantgivenglassgleamglideglobegloomglory"
    "glovegracegradegraingrandgrantgrapegraphgraspgrassgravegravygreatgreed"
    "greengreetgriefgrillgrindgroangroomgrossgroupgrovegrowlgrownguardguess"
    "guestguideguildguilthabithappyharshhastehatchhaunthavenheartheavyhedge"
    "hellohencehingehobbyhoneyhonorhorsehotelhoundhousehoverhumanhumorhurry"
    "idealimageimplyindexinnerinputironyissueivoryjellyjeweljointjollyjudge"
    "juicejumbokarmakayakkebabknackkneadkneelknifeknockknownlabellaborlarge"
    "laserlaterlaughlayerlearnleaseleastleaveledgelegallemonlevelleverlight"
    "limitlinenliverllamalobbylocallodgelogiclooselorryloverlowerloyallucky"
    "lunarlunchlyingmagicmajormakermangomanormaplemarchmarshmatchmayormeant"
    "medalmediamelonmercymeritmerrymetalmetermidstmightminorminusmirthmixed"
    "modelmoistmoneymonthmoralmotormoundmountmournmousemouthmoviemuddymusic"
    "naivenervenevernewlyniecenightninjanoblenoisenorthnovelnursenylonoasis"
    "oceanofferoftenoliveonionoperaorbitorderorganotherotteroughtounceouter"
    "owneroxideozonepaintpanelpanicpaperpartypastapatchpausepeacepeachpearl"
    "pedalpennyperchphasephonephotopianopiecepilotpinchpitchpixelpizzaplace"
    "plainplaneplantplateplazapleadpluckplumbplumeplushpoemspointpolarporch"
    "pouchpoundpowerpresspriceprideprimeprintpriorprismprizeprobeproneproof"
    "proudproveprunepulsepunchpupilpuppypursequeenqueryquestqueuequickquiet"
    "quiltquitequotaquoteradarradiorainyraiserallyranchrangerapidratioraven"
    "razorreachreactreadyrealmrebelreferreignrelaxrelayreplyriderridgerifle"
    "rightrigidrinseripenriskyrivalriverroastrobinrobotrockyrogueromanroost"
    "roughroundrouteroyalrugbyrulerruralrustysadlysaintsaladsalonsaltysauce"
    "scalescarescarfscenescentscopescorescoutscrapscrewsenseservesevenshade"
    "shakeshallshameshapesharesharksharpshavesheepsheetshelfshellshiftshine"
    "shirtshockshoreshortshoutshrubsightsillysinceskateskillskirtskullslate"
    "sleepsliceslideslopesmallsmartsmellsmilesmokesnacksnakesneaksolarsolid"
    "solvesorrysoundsouthspacesparesparkspeakspearspeedspellspendspicespill"
    "spinespitesplitspoonsportspraysquadstackstaffstagestairstakestalestall"
    "stampstandstarestartstatesteakstealsteamsteelsteepsteersternstickstill"
    "stingstockstonestoolstormstorystovestrapstrawstraystripstuckstudystuff"
    "stylesugarsuitesunnysupersurgeswampswarmswearsweatsweepsweetswiftswing"
    "swordsyruptabletakentasteteachteethtempotensetenththankthefttheirtheme"
    "therethickthiefthingthinkthirdthornthosethreethrewthrowthumbtigertight"
    "timertiredtitletoasttodaytokentoothtopictorchtotaltouchtoughtoweltower"
    "toxictracetracktradetrailtraintraittreattrendtrialtribetricktriedtroop"
    "trucktrulytrunktrusttruthtuliptumortutortwicetwistudderultrauncleunder"
    "unionuniteunityuntilupperupseturbanusageusualuttervalidvaluevalvevapor"
    "vaultvenueversevideovigorviralvirusvisitvitalvividvocalvoicevoterwagon"
    "waistwastewatchwaterwearyweavewedgeweighweirdwhalewheatwheelwherewhich"
    "whilewhirlwhitewholewhosewidenwidowwidthwitchwomanwomenworldworryworse"
    "worstworthwouldwoundwrathwristwritewrongwroteyachtyearnyeastyieldyoung"
    "youthzebrazesty"
)
